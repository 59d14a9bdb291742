"""Tests for the command-line interface."""

from unittest.mock import AsyncMock, patch

import pytest
from netkit.cli import create_parser, main
from netkit.http.errors import ClientStatusError, InvalidURLError


class TestParser:
    """Tests for argument parsing."""

    def test_method_and_url(self):
        args = create_parser().parse_args(["get", "https://example.com"])
        assert args.method == "GET"
        assert args.url == "https://example.com"
        assert args.param == []
        assert args.header == []
        assert args.data is None

    def test_params_and_headers(self):
        args = create_parser().parse_args(
            ["GET", "https://example.com", "-p", "page=2", "-p", "q=a=b", "-H", "Accept: text/html"]
        )
        assert args.param == [("page", "2"), ("q", "a=b")]
        assert args.header == [("Accept", "text/html")]

    def test_invalid_param(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["GET", "https://example.com", "-p", "novalue"])

    def test_unknown_method(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["TRACE", "https://example.com"])


class TestMain:
    """Tests for main()."""

    @patch("netkit.cli.HttpClient.arequest", new_callable=AsyncMock)
    def test_success_writes_payload(self, mock_request, capsysbinary):
        mock_request.return_value = b"hello"

        exit_code = main(["GET", "https://example.com", "-p", "id=1", "-H", "X-Trace: abc"])

        assert exit_code == 0
        assert capsysbinary.readouterr().out == b"hello"
        args, kwargs = mock_request.call_args
        assert args[1] == "https://example.com"
        assert args[2] is None
        assert kwargs["params"] == {"id": "1"}
        assert kwargs["headers"] == {"X-Trace": "abc"}

    @patch("netkit.cli.HttpClient.arequest", new_callable=AsyncMock)
    def test_post_defaults_to_empty_body(self, mock_request):
        mock_request.return_value = None

        assert main(["POST", "https://example.com"]) == 0
        assert mock_request.call_args[0][2] == b""

    @patch("netkit.cli.HttpClient.arequest", new_callable=AsyncMock)
    def test_body_from_file(self, mock_request, tmp_path):
        mock_request.return_value = None
        payload = tmp_path / "body.json"
        payload.write_bytes(b'{"a": 1}')

        assert main(["PUT", "https://example.com", "-d", f"@{payload}"]) == 0
        assert mock_request.call_args[0][2] == b'{"a": 1}'

    @patch("netkit.cli.HttpClient.arequest", new_callable=AsyncMock)
    def test_classified_failure(self, mock_request, capsys):
        mock_request.side_effect = ClientStatusError(404, b"missing")

        assert main(["GET", "https://example.com/x"]) == 1
        err = capsys.readouterr().err
        assert "ClientStatusError" in err
        assert "missing" in err

    def test_invalid_url(self, capsys):
        assert main(["GET", "not a url"]) == 1
        assert InvalidURLError.__name__ in capsys.readouterr().err

    def test_body_on_get_rejected(self, capsys):
        assert main(["GET", "https://example.com", "-d", "x"]) == 2
        assert "cannot carry a body" in capsys.readouterr().err

    def test_invalid_timeout(self, capsys):
        assert main(["GET", "https://example.com", "--timeout", "0"]) == 2
        assert "Configuration error" in capsys.readouterr().err

    def test_missing_body_file(self, capsys, tmp_path):
        assert main(["POST", "https://example.com", "-d", f"@{tmp_path / 'nope'}"]) == 2
