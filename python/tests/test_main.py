"""
Tests for main.py - command line launcher.
"""
import pytest
from unittest.mock import patch


class TestArgumentParsing:

    def test_defaults(self):
        from main import parse_args

        args = parse_args([])
        assert args.host == "127.0.0.1"
        assert args.port == 8000
        assert args.backend is None
        assert args.log_level == "info"

    def test_custom_values(self):
        from main import parse_args

        args = parse_args(["--host", "0.0.0.0", "--port", "9001", "--backend", "relay", "--log-level", "debug"])
        assert args.host == "0.0.0.0"
        assert args.port == 9001
        assert args.backend == "relay"
        assert args.log_level == "debug"

    def test_unknown_backend_rejected(self):
        from main import parse_args

        with pytest.raises(SystemExit):
            parse_args(["--backend", "google"])


class TestMain:

    def test_starts_server(self, clean_env):
        from main import main

        with patch('lingobridge.api_server.get_translation_client') as mock_get_client, \
             patch('lingobridge.api_server.run_api_server') as mock_run:
            result = main(["--port", "9100"])

        assert result == 0
        mock_get_client.assert_called_once()
        mock_run.assert_called_once_with("127.0.0.1", 9100, log_level="info")

    def test_backend_flag_sets_environment(self, clean_env):
        import os
        from main import main

        # monkeypatch records the variable so it is restored after the test
        clean_env.setenv("TRANSLATION_BACKEND", "huggingface")
        with patch('lingobridge.api_server.get_translation_client'), \
             patch('lingobridge.api_server.run_api_server'):
            main(["--backend", "relay"])

        assert os.environ["TRANSLATION_BACKEND"] == "relay"

    def test_configuration_error_exits_nonzero(self, clean_env):
        from main import main
        from lingobridge.errors import ConfigurationError

        with patch('lingobridge.api_server.get_translation_client', side_effect=ConfigurationError("bad config")), \
             patch('lingobridge.api_server.run_api_server') as mock_run:
            result = main([])

        assert result == 1
        mock_run.assert_not_called()
