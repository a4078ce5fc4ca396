"""
Core numeric primitives, domain helpers, and contracts.

Модули ядра не зависят от внешних систем и не выполняют I/O
(кроме загрузки JSON Schema файлов в contracts).
"""
