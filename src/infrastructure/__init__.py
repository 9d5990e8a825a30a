"""Infrastructure adapters, one subpackage per bounded context."""
