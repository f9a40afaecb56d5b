"""Value model for schemer: Symbol, Boolean, Number, List plus the runtime callables."""
