"""
Testes para logging estruturado.
"""
import json
import logging

from manup.core.logging import ColoredFormatter, JSONFormatter, get_logger, setup_logging


def _record(msg="mensagem", **attrs) -> logging.LogRecord:
    record = logging.LogRecord("manup.teste", logging.INFO, __file__, 10, msg, None, None)
    for key, value in attrs.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:

    def test_campos_basicos(self):
        data = json.loads(JSONFormatter().format(_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "manup.teste"
        assert data["message"] == "mensagem"

    def test_extra_fields(self):
        data = json.loads(JSONFormatter().format(_record(extra_fields={"verdict": "nop"})))
        assert data["verdict"] == "nop"


class TestColoredFormatter:

    def test_nao_altera_record_original(self):
        record = _record()
        saida = ColoredFormatter(fmt="%(levelname)s %(message)s").format(record)

        assert "\033[32m" in saida
        assert record.levelname == "INFO"


class TestGetLogger:

    def test_campos_fixos(self, caplog):
        logger = get_logger("manup.teste", platform="ios")

        with caplog.at_level(logging.INFO, logger="manup.teste"):
            logger.info("ok", extra={"extra_fields": {"url": "u"}})

        assert caplog.records[-1].extra_fields == {"platform": "ios", "url": "u"}


class TestSetupLogging:

    def test_producao_usa_json(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        try:
            setup_logging("production", "warning")
            assert isinstance(root.handlers[0].formatter, JSONFormatter)
            assert root.level == logging.WARNING
            assert logging.getLogger("httpx").level == logging.WARNING
        finally:
            root.handlers[:] = handlers
            root.setLevel(level)

    def test_desenvolvimento_usa_cores(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        try:
            setup_logging("development", "debug")
            assert isinstance(root.handlers[0].formatter, ColoredFormatter)
            assert root.level == logging.DEBUG
        finally:
            root.handlers[:] = handlers
            root.setLevel(level)
