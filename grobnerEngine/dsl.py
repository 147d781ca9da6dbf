'''
A small text format for polynomial systems.

    # Katsura-3
    @variables(x, y, z)
    @field(GF[5])
    @ordering(grlex)
    dense
    x + 2*y + 2*z - 1
    x^2 + 2*y^2 + 2*z^2 - x
    2*x*y + 2*y*z - y

Directives configure the ring: `@variables(...)` (inferred from the polynomials, in
order of appearance, when missing), `@field(R|C|Q|GF[p])` (default Q),
`@ordering(lex|grlex|grevlex)` (default grevlex) and `dense`/`sparse` (default dense).
Every other non blank line is a polynomial; `^` is exponentiation, `I` the imaginary
unit, and `#` starts a comment.
'''

import re
from fractions import Fraction
from pathlib import Path

import sympy as sp
from sympy.parsing.sympy_parser import parse_expr, rationalize, standard_transformations

from grobnerEngine.exceptions import ConversionError
from grobnerEngine.fields import Complex, Numeric, Real
from grobnerEngine.structures import Polynomial, PolynomialRing

_DIRECTIVE = re.compile(r'^@(\w+)\s*\((.*)\)$')
_GALOIS = re.compile(r'^GF\s*\[\s*(\d+)\s*\]$', re.IGNORECASE)
_NAME = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')


def _coefficient(value: sp.Expr, ring: PolynomialRing) -> Numeric:
    real, imaginary = value.as_real_imag()

    if imaginary != 0:
        if ring.field is not Complex:
            raise ConversionError(f'{value} is not a real number')
        return Complex(float(real), float(imaginary))

    if real.is_Rational:
        return ring.coefficient(Fraction(int(real.p), int(real.q)))

    return ring.coefficient(float(real))


def parse_polynomial(text: str, ring: PolynomialRing) -> Polynomial:
    '''
    Parses one polynomial written with + - * / ^ in the variables of ring.
    '''
    symbols = [sp.Symbol(name) for name in ring.variables]
    local_dict = {name: symbol for name, symbol in zip(ring.variables, symbols)}
    local_dict['I'] = sp.I

    transformations = standard_transformations
    if ring.field not in (Real, Complex):
        transformations = transformations + (rationalize,)

    expr = parse_expr(text.replace('^', '**'), local_dict=local_dict, transformations=transformations)

    unknown = expr.free_symbols - set(symbols)
    if unknown:
        raise ValueError(f'unknown variables {sorted(map(str, unknown))} in {text!r}')

    try:
        poly = sp.Poly(expr, *symbols)
    except sp.PolynomialError as e:
        raise ValueError(f'{text!r} is not a polynomial') from e

    terms = [ring.monomial(_coefficient(c, ring), exponents) for exponents, c in poly.terms()]

    return Polynomial(terms, ring.ordering, ring.ngens)


def _infer_variables(lines: list[str]) -> list[str]:
    variables = []
    for line in lines:
        for name in _NAME.findall(line):
            if name != 'I' and name not in variables:
                variables.append(name)

    return variables


def parse_system(text: str) -> tuple[PolynomialRing, list[Polynomial]]:
    '''
    Parses a polynomial system.

    Args:
    - text: the system, in the format described in the module docstring.

    Returns:
    - (ring, polynomials)
    '''
    variables = None
    field, modulus = 'Q', None
    ordering = 'grevlex'
    representation = 'dense'
    lines = []

    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.split('#', 1)[0].strip()
        if not line:
            continue

        if line in ('dense', 'sparse'):
            representation = line
            continue

        directive = _DIRECTIVE.match(line)
        if directive is None:
            lines.append(line)
            continue

        name, argument = directive.group(1).lower(), directive.group(2).strip()
        if name == 'variables':
            variables = [v.strip() for v in argument.split(',') if v.strip()]
        elif name == 'field':
            galois = _GALOIS.match(argument)
            if galois:
                field, modulus = 'GF', int(galois.group(1))
            elif argument.upper() in ('R', 'C', 'Q'):
                field, modulus = argument.upper(), None
            else:
                raise ValueError(f'line {number}: unknown field {argument}')
        elif name == 'ordering':
            ordering = argument.lower()
        else:
            raise ValueError(f'line {number}: unknown directive @{name}')

    if variables is None:
        variables = _infer_variables(lines)

    ring = PolynomialRing(field, variables, ordering, representation, modulus=modulus)

    return ring, [parse_polynomial(line, ring) for line in lines]


def load_system(path: str | Path) -> tuple[PolynomialRing, list[Polynomial]]:
    return parse_system(Path(path).read_text())
