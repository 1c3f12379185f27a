"""
CLI tests for the dump-keys and config commands
"""

import json
import logging
from logging.handlers import RotatingFileHandler

import pytest
import yaml
from typer.testing import CliRunner

from walletdump.__main__ import app


@pytest.mark.integration
class TestDumpKeysCommand:
    @classmethod
    def setup_class(cls):
        cls.runner = CliRunner()

    def test_text_output(self, wallet_file, master_payload, crypted_payloads):
        result = self.runner.invoke(app, ["dump-keys", str(wallet_file)])
        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[0] == "Mkey_encrypted: " + master_payload.hex()
        assert lines[1] == ""
        assert lines[2:] == ["encrypted ckey: " + p.hex() for p in crypted_payloads]

    def test_no_master_key(self, tmp_path):
        path = tmp_path / "plain.dat"
        path.write_bytes(b"\x00" * 256)
        result = self.runner.invoke(app, ["dump-keys", str(path)])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["There is no Master Key in the file"]

    def test_offsets(self, wallet_file):
        result = self.runner.invoke(app, ["dump-keys", "--offsets", str(wallet_file)])
        assert result.exit_code == 0
        assert result.stdout.splitlines()[0].endswith("@104")

    def test_json_output(self, wallet_file, master_payload):
        result = self.runner.invoke(app, ["dump-keys", "--format", "json", str(wallet_file)])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert len(payload) == 1
        assert payload[0]["master_key"]["hex"] == master_payload.hex()
        assert len(payload[0]["crypted_keys"]) == 3
        assert payload[0]["berkeleydb_header"] is True

    def test_missing_file(self, tmp_path):
        result = self.runner.invoke(app, ["dump-keys", str(tmp_path / "missing.dat")])
        assert result.exit_code == 1
        assert result.output.count("does not exist") == 1
        assert "Exception occurred" not in result.output

    def test_several_wallets(self, tmp_path, wallet_file):
        other = tmp_path / "empty.dat"
        other.write_bytes(b"")
        result = self.runner.invoke(app, ["dump-keys", str(wallet_file), str(other)])
        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[0] == f"== {wallet_file}"
        assert f"== {other}" in lines
        assert lines[-1] == "There is no Master Key in the file"

    def test_one_bad_wallet_sets_exit_code(self, tmp_path, wallet_file):
        result = self.runner.invoke(app, ["dump-keys", str(wallet_file), str(tmp_path / "gone.dat")])
        assert result.exit_code == 1
        assert "Mkey_encrypted: " in result.output

    def test_verbose_summary(self, wallet_file):
        result = self.runner.invoke(app, ["dump-keys", "-v", str(wallet_file)])
        assert result.exit_code == 0
        assert "Crypted keys: 3" in result.stdout

    def test_format_from_config(self, tmp_path, wallet_file):
        config_path = tmp_path / "config.yaml"
        config_path.write_text(yaml.safe_dump({"output": {"default_format": "json"}}))
        result = self.runner.invoke(app, ["dump-keys", "--config", str(config_path), str(wallet_file)])
        assert result.exit_code == 0
        assert json.loads(result.stdout)[0]["source"] == str(wallet_file)

    def test_invalid_config(self, tmp_path, wallet_file):
        config_path = tmp_path / "config.yaml"
        config_path.write_text(yaml.safe_dump({"logging": {"log_level": "LOUD"}}))
        result = self.runner.invoke(app, ["dump-keys", "--config", str(config_path), str(wallet_file)])
        assert result.exit_code == 2
        assert "Invalid log level: LOUD" in result.output
        assert "Config key: logging.log_level" in result.output


@pytest.mark.integration
class TestConfigCommand:
    def test_shows_summary(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text(yaml.safe_dump({"output": {"show_offsets": True}}))
        result = CliRunner().invoke(app, ["config", "--config", str(config_path)])
        assert result.exit_code == 0
        assert "show_offsets: True" in result.stdout
        assert "default_format: text" in result.stdout


@pytest.mark.integration
class TestFileLoggingConfig:
    def test_rotation_settings_reach_file_handler(self, tmp_path, monkeypatch, wallet_file):
        monkeypatch.setenv("HOME", str(tmp_path))
        config_path = tmp_path / "c.yaml"
        config_path.write_text(
            yaml.safe_dump({"logging": {"log_to_file": True, "log_file_max_size": 1234, "log_backup_count": 1}})
        )
        root_logger = logging.getLogger("walletdump")
        try:
            result = CliRunner().invoke(app, ["dump-keys", "--config", str(config_path), str(wallet_file)])
            assert result.exit_code == 0
            handlers = [h for h in root_logger.handlers if isinstance(h, RotatingFileHandler)]
            assert len(handlers) == 1
            assert handlers[0].maxBytes == 1234
            assert handlers[0].backupCount == 1
        finally:
            for handler in [h for h in root_logger.handlers if isinstance(h, RotatingFileHandler)]:
                root_logger.removeHandler(handler)
                handler.close()
