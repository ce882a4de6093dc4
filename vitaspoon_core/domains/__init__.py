"""
Dominios específicos de VitaSpoon.

Cada dominio define:
- Modelos de dominio específicos
- Prompts específicos
- Parsers específicos
- Lógica de selección y síntesis
"""
