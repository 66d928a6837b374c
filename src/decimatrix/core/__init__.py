"""
Core primitives: decimal128 arithmetic, codec, tokenizer, domain models.

Модуль не зависит от движка (engine) и не хранит глобального состояния.
"""
