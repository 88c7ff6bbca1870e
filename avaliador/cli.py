"""Interactive menu for converting and evaluating numeric expressions."""

from __future__ import annotations

import argparse
import math
import re
import sys
from typing import Callable, TextIO

from avaliador.expressao import (
    Expressao,
    ExpressionError,
    forma_infixa,
    forma_pos_fixa,
    valor_infixa,
    valor_pos_fixa,
)

_MENU = (
    "\n=== Avaliador de Expressoes Numericas ===\n"
    "1. Converter Infixa para Pos-fixa\n"
    "2. Converter Pos-fixa para Infixa\n"
    "3. Calcular valor de expressao Infixa\n"
    "4. Calcular valor de expressao Pos-fixa\n"
    "0. Sair\n"
    "=======================================\n"
    "Escolha uma opcao: "
)

_PROMPT_INFIXA = "Digite a expressao infixa: "
_PROMPT_POS_FIXA = "Digite a expressao pos-fixa: "
_OPCAO = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def exibir_menu(out: TextIO) -> None:
    """Write the main menu to ``out``."""
    out.write(_MENU)


def _resultado(valor: float) -> str | None:
    return None if math.isnan(valor) else f"Resultado: {valor:.2f}"


def _converter_para_pos_fixa(texto: str, exp: Expressao) -> str | None:
    exp.infixa = texto
    posfixa = forma_pos_fixa(texto)
    return f"Expressao pos-fixa: {posfixa}" if posfixa else None


def _converter_para_infixa(texto: str, exp: Expressao) -> str | None:
    exp.pos_fixa = texto
    return f"Expressao infixa: {forma_infixa(texto)}"


def _calcular_infixa(texto: str, exp: Expressao) -> str | None:
    exp.valor = valor_infixa(texto)
    return _resultado(exp.valor)


def _calcular_pos_fixa(texto: str, exp: Expressao) -> str | None:
    exp.valor = valor_pos_fixa(texto)
    return _resultado(exp.valor)


_ACOES: dict[int, tuple[str, Callable[[str, Expressao], str | None]]] = {
    1: (_PROMPT_INFIXA, _converter_para_pos_fixa),
    2: (_PROMPT_POS_FIXA, _converter_para_infixa),
    3: (_PROMPT_INFIXA, _calcular_infixa),
    4: (_PROMPT_POS_FIXA, _calcular_pos_fixa),
}


def _ler_opcao(linha: str) -> int | None:
    encontrado = _OPCAO.match(linha)
    return int(encontrado.group(1)) if encontrado else None


def run(stdin: TextIO, stdout: TextIO) -> None:
    """Run the menu loop until option 0 is chosen or input ends."""
    exp = Expressao()
    while True:
        exibir_menu(stdout)
        linha = stdin.readline()
        if not linha:
            stdout.flush()
            return
        opcao = _ler_opcao(linha)
        if opcao == 0:
            stdout.write("Saindo...\n")
            stdout.flush()
            return
        acao = _ACOES.get(opcao) if opcao is not None else None
        if acao is None:
            stdout.write("Opcao invalida!\n")
            continue

        prompt, tratar = acao
        stdout.write(prompt)
        entrada = stdin.readline()
        if not entrada:
            stdout.flush()
            return
        texto = entrada.rstrip("\r\n")
        try:
            mensagem = tratar(texto, exp)
        except ExpressionError as erro:
            stdout.write(f"Erro: {erro}\n")
            continue
        if mensagem:
            stdout.write(mensagem + "\n")


def main(argv: list[str] | None = None) -> int:
    """Start the interactive expression evaluator."""
    parser = argparse.ArgumentParser(
        prog="avaliador",
        description="Avaliador de expressoes numericas infixas e pos-fixas.",
    )
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())