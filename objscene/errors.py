# objscene/errors.py
"""
Иерархия исключений загрузчика.

Фатальные (прерывают загрузку целиком):
    * IOFailure        – файл сцены отсутствует или не читается
    * ParseFailure     – парсер сообщил об ошибке (текст диагностики внутри)
    * IndexOutOfRange  – грань ссылается за пределы массива атрибутов/материалов

Нефатальная:
    * TextureDecodeFailure – текстура не декодировалась, меш остаётся без неё
"""


class SceneLoadError(Exception):
    """Базовый класс всех ошибок загрузки сцены."""


class IOFailure(SceneLoadError):
    pass


class ParseFailure(SceneLoadError):
    def __init__(self, message: str, diagnostic: str = ""):
        super().__init__(message)
        self.diagnostic = diagnostic


class IndexOutOfRange(SceneLoadError, IndexError):
    pass


class TextureDecodeFailure(SceneLoadError):
    pass
