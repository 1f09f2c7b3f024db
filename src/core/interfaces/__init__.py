"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Los servicios y la CLI dependen del contrato, no del SDK de Hedera.
"""
