from unittest.mock import patch

import run_server


def test_app_loggers_configured_for_reload_worker():
    with patch("run_server.uvicorn.run") as mock_run:
        run_server.main()

    kwargs = mock_run.call_args.kwargs
    assert kwargs["reload"] is True
    assert kwargs["log_config"] is run_server.LOG_CONFIG

    app_logger = run_server.LOG_CONFIG["loggers"]["formsmith"]
    assert app_logger["level"] == "INFO"
    assert app_logger["handlers"] == ["default"]
    assert "default" in run_server.LOG_CONFIG["handlers"]


def test_uvicorn_default_config_left_untouched():
    from uvicorn.config import LOGGING_CONFIG

    assert "formsmith" not in LOGGING_CONFIG["loggers"]
    assert run_server.LOG_CONFIG["loggers"]["uvicorn.access"] == LOGGING_CONFIG["loggers"]["uvicorn.access"]
