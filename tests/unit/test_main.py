"""Tests for the command line entry point."""

from unittest.mock import patch

from track_studio.main import build_parser, main


def test_defaults_come_from_settings():
    args = build_parser().parse_args([])

    assert args.host == "0.0.0.0"
    assert args.port == 8000
    assert args.log_level == "info"
    assert args.reload is False


def test_main_runs_uvicorn_with_arguments():
    with patch("track_studio.main.uvicorn.run") as run:
        main(["--port", "9100", "--log-level", "debug"])

    run.assert_called_once_with(
        "track_studio.app:app", host="0.0.0.0", port=9100, log_level="debug", reload=False
    )
