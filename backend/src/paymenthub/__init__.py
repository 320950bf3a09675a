"""
PaymentHub - validated value objects for payment requests.

Money, Brazilian tax ids (CPF/CNPJ), card numbers and emails that every
gateway request and response in PaymentHub is built from.
"""

__version__ = "1.0.0"
