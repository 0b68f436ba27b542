"""
Core Domain Layer - O Hexágono.

Lógica de negócio pura do contexto de Pagamentos, sem dependências de
frameworks. Validação por notificações; adapters implementam os ports.
"""
