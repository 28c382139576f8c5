"""
Polynomial Arithmetic — арифметика полиномов

Фундамент для упрощения, дифференцирования, интегрирования и раскрытия.

ИНВАРИАНТЫ:
1. Сложение — конкатенация термов, подобные термы НЕ объединяются
   (объединение — задача Simplifier)
2. Умножение термов складывает показатели общих переменных: x^m * x^n = x^(m+n)
3. Умножение полиномов — декартово произведение термов (FOIL), O(|p|·|q|)
4. Входные полиномы не изменяются, результат не разделяет с ними термы
"""

from ratalg.core.domain import Polynomial, Term


def multiply_terms(a: Term, b: Term) -> Term:
    """
    Произведение двух термов.

    Examples:
        >>> from ratalg.core.domain import make_term
        >>> multiply_terms(make_term(2, {"x": 1}), make_term(3, {"x": 2, "y": 1}))
        Term(coefficient=6.0, exponents={'x': 3, 'y': 1})
    """
    exponents = dict(a.exponents)
    for variable, power in b.exponents.items():
        exponents[variable] = exponents.get(variable, 0) + power
    return Term(coefficient=a.coefficient * b.coefficient, exponents=exponents)


def negate_polynomial(p: Polynomial) -> Polynomial:
    """Смена знака каждого коэффициента."""
    return Polynomial(terms=[t.with_coefficient(-t.coefficient) for t in p.terms])


def add_polynomials(p: Polynomial, q: Polynomial) -> Polynomial:
    """Сумма полиномов: термы p, затем термы q."""
    return Polynomial(terms=[*p.terms, *q.terms])


def subtract_polynomials(p: Polynomial, q: Polynomial) -> Polynomial:
    """Разность полиномов: p + (-q)."""
    return add_polynomials(p, negate_polynomial(q))


def multiply_polynomials(p: Polynomial, q: Polynomial) -> Polynomial:
    """Произведение полиномов (FOIL) без упрощения."""
    return Polynomial(terms=[multiply_terms(a, b) for a in p.terms for b in q.terms])


def scale_polynomial(p: Polynomial, k: float) -> Polynomial:
    """Умножение каждого коэффициента на скаляр k."""
    return Polynomial(terms=[t.with_coefficient(t.coefficient * k) for t in p.terms])
