"""Core: configuración, dominio, contratos y servicios (sin I/O concreto)."""
