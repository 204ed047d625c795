"""Evaluation: AST walking, operator application and special forms."""
