"""
Core Domain Layer - O Hexágono.

Este pacote contém a orquestração de ciclo de vida pura, sem dependências
de frameworks.
Características:
- Zero dependências externas (Django, etc.)
- 100% testável sem banco de dados
- Agnóstico a infraestrutura
"""
