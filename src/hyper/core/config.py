"""
Config — константы библиотеки

Единственное место, где задаются параметры отображения и логирования.
Внешней конфигурации (env, файлы) нет: библиотека чисто вычислительная.
"""

from typing import Final


# =============================================================================
# ОТОБРАЖЕНИЕ
# =============================================================================

# Префикс для трансфинитных кардиналов: Aleph(0) → "ℵ0"
ALEPH_SYMBOL: Final[str] = "ℵ"


# =============================================================================
# ЛОГИРОВАНИЕ
# =============================================================================

# Корневой logger пакета; handlers настраивает приложение, не библиотека
LOGGER_NAME: Final[str] = "hyper"
