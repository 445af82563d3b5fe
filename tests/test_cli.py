import logging
from types import SimpleNamespace

from blog_loader import cli
from blog_loader.config import AppConfig, LoggingConfig


def _restore_handlers(original_handlers):
    for handler in logging.getLogger().handlers[:]:
        logging.getLogger().removeHandler(handler)
        handler.close()
    for handler in original_handlers:
        logging.getLogger().addHandler(handler)


def test_configure_logging_defaults_to_console_only():
    original_handlers = list(logging.getLogger().handlers)
    try:
        cli.configure_logging("INFO")

        handlers = logging.getLogger().handlers
        assert any(isinstance(handler, logging.StreamHandler) for handler in handlers)
        assert not any(isinstance(handler, logging.FileHandler) for handler in handlers)
    finally:
        _restore_handlers(original_handlers)


def test_configure_logging_with_log_file_creates_file_handler(tmp_path):
    original_handlers = list(logging.getLogger().handlers)
    try:
        log_path = tmp_path / "logs" / "custom.log"
        cli.configure_logging("INFO", str(log_path))

        assert log_path.exists()
        handlers = logging.getLogger().handlers
        assert any(isinstance(handler, logging.FileHandler) for handler in handlers)
    finally:
        _restore_handlers(original_handlers)


def test_main_loads_config_and_runs(monkeypatch, capsys):
    monkeypatch.setattr(cli, "configure_logging", lambda level, log_file=None: None)
    monkeypatch.setattr(
        cli,
        "parse_app_config",
        lambda path: AppConfig(source="data.json", title="Notes", timeout=3.0),
    )

    captured = {}

    def fake_execute(config):
        captured["config"] = config
        return SimpleNamespace(html="<html></html>", article_count=0, output_path=None)

    monkeypatch.setattr(cli, "execute", fake_execute)

    exit_code = cli.main(["--config", "configs/test.xml", "--search", "py", "--open", "2"])

    assert exit_code == 0
    run_config = captured["config"]
    assert run_config.source == "data.json"
    assert run_config.title == "Notes"
    assert run_config.timeout == 3.0
    assert run_config.search == "py"
    assert run_config.open_index == 2
    assert "<html></html>" in capsys.readouterr().out


def test_main_cli_overrides_config(monkeypatch):
    captured = {}

    def fake_configure(level, log_file=None):
        captured["level"] = level
        captured["file"] = log_file

    monkeypatch.setattr(cli, "configure_logging", fake_configure)
    monkeypatch.setattr(
        cli,
        "parse_app_config",
        lambda path: AppConfig(
            source="config.json",
            output="config.html",
            logging=LoggingConfig(level="INFO", file="config.log"),
        ),
    )

    def fake_execute(config):
        captured["config"] = config
        return SimpleNamespace(html="", article_count=0, output_path=config.output)

    monkeypatch.setattr(cli, "execute", fake_execute)

    cli.main(
        [
            "--config",
            "c.xml",
            "--source",
            "cli.json",
            "--output",
            "cli.html",
            "--log-level",
            "DEBUG",
            "--log-file",
            "cli.log",
        ]
    )

    assert captured["level"] == "DEBUG"
    assert captured["file"] == "cli.log"
    assert captured["config"].source == "cli.json"
    assert captured["config"].output == "cli.html"


def test_main_without_config_uses_defaults(monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda level, log_file=None: None)

    def fail_parse(path):
        raise AssertionError("config should not be parsed")

    monkeypatch.setattr(cli, "parse_app_config", fail_parse)
    captured = {}

    def fake_execute(config):
        captured["config"] = config
        return SimpleNamespace(html="", article_count=0, output_path=None)

    monkeypatch.setattr(cli, "execute", fake_execute)

    assert cli.main([]) == 0
    assert captured["config"].source == "blog-articles.json"


def test_main_returns_error_on_runtime_failure(monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda level, log_file=None: None)

    def boom(config):
        raise LookupError("Article container #blogList not found.")

    monkeypatch.setattr(cli, "execute", boom)

    assert cli.main([]) == 1


def test_main_end_to_end_writes_page(write_articles, make_article, tmp_path, monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda level, log_file=None: None)
    source = write_articles({"articles": [make_article(title="Alpha")]})
    output = tmp_path / "out" / "blog.html"

    assert cli.main(["--source", source, "--output", str(output)]) == 0

    html = output.read_text(encoding="utf-8")
    assert "Alpha" in html
    assert 'id="blogList"' in html
