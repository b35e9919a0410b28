"""Equation Solver plugin manifest."""

manifest = {
    "title": "Equation Solver",
    "summary": "Solve linear systems by Gaussian elimination, quadratics, and low-degree polynomials.",
    "category": "Mathematics",
    "blueprint": "equation_solver",
}

__all__ = ["manifest"]
