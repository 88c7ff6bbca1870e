"""Conversion and evaluation of numeric expressions in infix and postfix form."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

OPERADORES = "+-*/%^"
FUNCOES_ESPECIAIS = frozenset({"raiz", "sen", "cos", "tg", "log"})

_PRECEDENCIA = {"^": 4, "*": 3, "/": 3, "%": 3, "+": 2, "-": 2}
_DIGITOS = "0123456789"
_NUMERO = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class ExpressionError(ValueError):
    """Raised when an expression is empty, malformed or cannot be evaluated."""


@dataclass
class Expressao:
    """An expression in postfix and infix form together with its value."""

    pos_fixa: str = ""
    infixa: str = ""
    valor: float = math.nan


def precedencia(op: str) -> int:
    """Return the precedence of an operator; 0 for anything else."""
    return _PRECEDENCIA.get(op, 0)


def is_operador(c: str) -> bool:
    """Tell whether ``c`` is one of the binary operators."""
    return len(c) == 1 and c in OPERADORES


def is_funcao_especial(token: str) -> bool:
    """Tell whether ``token`` names one of the special functions."""
    return token in FUNCOES_ESPECIAIS


def graus_para_radianos(graus: float) -> float:
    """Convert degrees to radians."""
    return graus * math.pi / 180.0


def _is_digit(ch: str) -> bool:
    return ch != "" and ch in _DIGITOS


def _is_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _is_numero(token: str) -> bool:
    if _is_digit(token[0]):
        return True
    return token[0] == "-" and len(token) > 1 and _is_digit(token[1])


def _para_float(token: str) -> float:
    """Read the leading number of a token, ignoring whatever follows it."""
    encontrado = _NUMERO.match(token)
    return float(encontrado.group()) if encontrado else 0.0


def _tokens(posfixa: str) -> list[str]:
    return [token for token in posfixa.split(" ") if token]


def forma_pos_fixa(infixa: str) -> str:
    """Convert an infix expression to postfix form, tokens separated by spaces.

    The argument of a special function is copied as written, followed by the
    function name.
    """
    if not infixa:
        raise ExpressionError("Expressao infixa vazia ou invalida!")

    saida: list[str] = []
    operadores: list[str] = []
    i, tamanho = 0, len(infixa)
    while i < tamanho:
        ch = infixa[i]
        if ch == " ":
            i += 1
            continue
        if _is_digit(ch) or ch == ".":
            inicio = i
            while i < tamanho and (_is_digit(infixa[i]) or infixa[i] == "."):
                i += 1
            saida.append(infixa[inicio:i])
            continue
        if _is_alpha(ch):
            inicio = i
            while i < tamanho and _is_alpha(infixa[i]):
                i += 1
            nome = infixa[inicio:i]
            if not is_funcao_especial(nome):
                raise ExpressionError("Funcao especial desconhecida!")
            if i >= tamanho or infixa[i] != "(":
                raise ExpressionError("Esperado '(' apos funcao especial!")
            fim = infixa.find(")", i + 1)
            if fim < 0:
                raise ExpressionError(
                    "Parentese de fechamento ')' ausente na funcao especial!"
                )
            argumento = infixa[i + 1 : fim].strip()
            if argumento:
                saida.append(argumento)
            saida.append(nome)
            i = fim + 1
            continue
        if ch == "(":
            operadores.append(ch)
        elif ch == ")":
            while operadores and operadores[-1] != "(":
                saida.append(operadores.pop())
            if not operadores:
                raise ExpressionError(
                    "Parentese de fechamento ')' sem correspondente de abertura!"
                )
            operadores.pop()
        elif is_operador(ch):
            while operadores and precedencia(operadores[-1]) >= precedencia(ch):
                saida.append(operadores.pop())
            operadores.append(ch)
        i += 1

    while operadores:
        op = operadores.pop()
        if op == "(":
            raise ExpressionError(
                "Parentese de abertura '(' sem correspondente de fechamento!"
            )
        saida.append(op)
    return " ".join(saida)


def forma_infixa(posfixa: str) -> str:
    """Convert a postfix expression to a fully parenthesised infix form."""
    if not posfixa:
        raise ExpressionError("Expressao posfixa vazia ou invalida!")

    pilha: list[str] = []
    for token in _tokens(posfixa):
        if _is_numero(token):
            pilha.append(token)
        elif is_operador(token):
            if len(pilha) < 2:
                raise ExpressionError(
                    f"Operador '{token}' sem operandos suficientes!"
                )
            b = pilha.pop()
            a = pilha.pop()
            pilha.append(f"({a}{token}{b})")
        elif is_funcao_especial(token):
            if not pilha:
                raise ExpressionError(f"Funcao especial '{token}' sem operando!")
            pilha.append(f"{token}({pilha.pop()})")
        else:
            raise ExpressionError(
                f"Token desconhecido na expressao posfixa: '{token}'"
            )

    if len(pilha) != 1:
        raise ExpressionError("Expressao posfixa mal formada!")
    return pilha[0]


def _potencia(a: float, b: float) -> float:
    try:
        return math.pow(a, b)
    except OverflowError:
        negativo = a < 0 and b.is_integer() and int(b) % 2 == 1
        return -math.inf if negativo else math.inf
    except ValueError:
        return math.inf if a == 0 else math.nan


def _resto(a: float, b: float) -> float:
    if b == 0:
        return math.nan
    try:
        return math.fmod(a, b)
    except ValueError:
        return math.nan


def _aplicar_operador(op: str, a: float, b: float) -> float:
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if op == "/":
        if b == 0:
            raise ExpressionError("Divisao por zero!")
        return a / b
    if op == "%":
        return _resto(a, b)
    return _potencia(a, b)


def _trigonometrica(funcao, graus: float) -> float:
    try:
        return funcao(graus_para_radianos(graus))
    except ValueError:
        return math.nan


def _aplicar_funcao(nome: str, a: float) -> float:
    if nome == "raiz":
        if a < 0:
            raise ExpressionError("Raiz de numero negativo!")
        return math.sqrt(a)
    if nome == "sen":
        return _trigonometrica(math.sin, a)
    if nome == "cos":
        return _trigonometrica(math.cos, a)
    if nome == "tg":
        return _trigonometrica(math.tan, a)
    if a <= 0:
        raise ExpressionError("Logaritmo de numero nao positivo!")
    return math.log10(a)


def valor_pos_fixa(posfixa: str) -> float:
    """Evaluate a postfix expression; trigonometric arguments are in degrees."""
    if not posfixa:
        raise ExpressionError("Expressao posfixa vazia ou invalida!")

    pilha: list[float] = []
    for token in _tokens(posfixa):
        if _is_numero(token):
            pilha.append(_para_float(token))
        elif token[0] in OPERADORES:
            if len(pilha) < 2:
                raise ExpressionError(
                    f"Operador '{token[0]}' sem operandos suficientes!"
                )
            b = pilha.pop()
            a = pilha.pop()
            pilha.append(_aplicar_operador(token[0], a, b))
        elif is_funcao_especial(token):
            if not pilha:
                raise ExpressionError(f"Funcao especial '{token}' sem operando!")
            pilha.append(_aplicar_funcao(token, pilha.pop()))
        else:
            raise ExpressionError(
                f"Token desconhecido na expressao posfixa: '{token}'"
            )

    if len(pilha) != 1:
        raise ExpressionError("Expressao posfixa mal formada!")
    return pilha[0]


def valor_infixa(infixa: str) -> float:
    """Evaluate an infix expression by way of its postfix form."""
    if not infixa:
        raise ExpressionError("Expressao infixa vazia ou invalida!")
    posfixa = forma_pos_fixa(infixa)
    if not posfixa:
        raise ExpressionError("Falha ao converter infixa para posfixa!")
    return valor_pos_fixa(posfixa)