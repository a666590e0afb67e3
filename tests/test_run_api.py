"""Tests for run_api.py; uvicorn is mocked, no server is started."""

from unittest.mock import patch

import config
import run_api


def test_parse_args_defaults():
    args = run_api.parse_args([])
    assert args.host == config.API_HOST
    assert args.port == config.API_PORT
    assert not args.reload
    assert not args.seed


def test_main_starts_uvicorn_with_overrides():
    with patch("run_api.uvicorn.run") as mock_run:
        assert run_api.main(["--host", "0.0.0.0", "--port", "9001", "--reload"]) == 0
    mock_run.assert_called_once_with("api.main:app", host="0.0.0.0", port=9001, reload=True)


def test_seed_flag_enables_demo_seeding(monkeypatch):
    monkeypatch.setattr(config, "SEED_DEMO_DATA", False)
    monkeypatch.delenv("PERSONNEL_SEED_DEMO", raising=False)
    with patch("run_api.uvicorn.run"):
        run_api.main(["--seed"])
    assert config.SEED_DEMO_DATA is True
