# avaliador

Avaliador de expressões numéricas. Converte expressões entre as formas infixa
(`3 * (12 + 4)`) e pós-fixa (`3 12 4 + *`) e calcula o seu valor.

Operadores suportados, em ordem de precedência (todos associativos à
esquerda):

- `^` (potência)
- `*`, `/`, `%` (resto em ponto flutuante)
- `+`, `-`

Funções especiais: `raiz`, `sen`, `cos`, `tg` (ângulos em graus) e `log`
(base 10). Na forma infixa o argumento de uma função especial é copiado tal
como foi escrito para a forma pós-fixa, seguido do nome da função; use um
único número como argumento (por exemplo `raiz(16)`).

## Instalação

```
pip install .
```

## Uso interativo

```
avaliador
```

Abre um menu:

```
=== Avaliador de Expressoes Numericas ===
1. Converter Infixa para Pos-fixa
2. Converter Pos-fixa para Infixa
3. Calcular valor de expressao Infixa
4. Calcular valor de expressao Pos-fixa
0. Sair
```

Depois de escolher uma opção, digite a expressão. Os resultados numéricos são
mostrados com duas casas decimais (`Resultado: 48.00`); erros aparecem como
`Erro: <mensagem>`. O menu termina com a opção `0` ou no fim da entrada.

## Uso como biblioteca

```python
from avaliador.expressao import (
    ExpressionError,
    forma_pos_fixa,
    forma_infixa,
    valor_infixa,
    valor_pos_fixa,
)

forma_pos_fixa("3 * (12 + 4)")   # '3 12 4 + *'
forma_infixa("3 12 4 + *")       # '(3*(12+4))'
valor_pos_fixa("3 12 4 + *")     # 48.0
valor_infixa("raiz(16) + 1")     # 5.0

try:
    valor_pos_fixa("1 0 /")
except ExpressionError as erro:
    print(erro)                  # Divisao por zero!
```

Expressões inválidas (vazias, parênteses sem par, função desconhecida,
operandos insuficientes, token desconhecido, divisão por zero, raiz de
negativo, logaritmo de não positivo) levantam `ExpressionError`, subclasse de
`ValueError`.

Outras funções do módulo `avaliador.expressao`: `precedencia`, `is_operador`,
`is_funcao_especial` e `graus_para_radianos`. A classe `Expressao` agrupa as
formas `pos_fixa` e `infixa` de uma expressão e o seu `valor`.

## Testes

```
pip install .[test]
pytest
```