from .exchange import HttpxExchanger

__all__ = ["HttpxExchanger"]
