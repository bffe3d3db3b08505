"""
Configuração do Lifecycle Orchestrator.

Módulos:
- settings: Configurações Django (banco, logging, paginação)
- container: Dependency Injection Container
"""
