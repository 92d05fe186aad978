"""Sumsub bridge: подписи исходящих запросов и проверка входящих вебхуков."""

__version__ = "0.1.0"
