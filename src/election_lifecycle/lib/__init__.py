"""Pure election lifecycle and comparison libraries."""
