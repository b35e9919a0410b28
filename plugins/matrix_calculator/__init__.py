"""Matrix Calculator plugin manifest."""

manifest = {
    "title": "Matrix Calculator",
    "summary": "Add, subtract, multiply and transpose matrices; cofactor determinants and adjugate inverses.",
    "category": "Mathematics",
    "blueprint": "matrix_calculator",
}

__all__ = ["manifest"]
