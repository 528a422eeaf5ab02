from pathlib import Path

from dconfig.system.path_resolver import PathResolver


class TestPathResolver:
    """Test workspace path resolution."""

    def test_explicit_root(self, ws_root):
        """Should use the root it is given."""
        resolver = PathResolver(str(ws_root))

        assert resolver.ws_root == ws_root
        assert resolver.get_config_path() == ws_root / "dendron.yml"
        assert resolver.get_hooks_dir() == ws_root / "hooks"

    def test_root_from_env(self, monkeypatch, tmp_path):
        """Should read DENDRON_WS_ROOT when no root is given."""
        monkeypatch.setenv("DENDRON_WS_ROOT", str(tmp_path))

        assert PathResolver().ws_root == tmp_path

    def test_root_defaults_to_cwd(self, monkeypatch, tmp_path):
        """Should fall back to the current directory."""
        monkeypatch.delenv("DENDRON_WS_ROOT", raising=False)
        monkeypatch.chdir(tmp_path)

        assert PathResolver().ws_root == Path.cwd()

    def test_log_level(self, monkeypatch, path_resolver):
        """Should read DCONFIG_LOG_LEVEL, upper-cased, defaulting to INFO."""
        monkeypatch.delenv("DCONFIG_LOG_LEVEL", raising=False)
        assert path_resolver.get_log_level() == "INFO"

        monkeypatch.setenv("DCONFIG_LOG_LEVEL", "debug")
        assert path_resolver.get_log_level() == "DEBUG"

    def test_json_logs(self, monkeypatch, path_resolver):
        """Should enable JSON logs only for DCONFIG_JSON_LOGS=true."""
        monkeypatch.delenv("DCONFIG_JSON_LOGS", raising=False)
        assert not path_resolver.use_json_logs()

        monkeypatch.setenv("DCONFIG_JSON_LOGS", "TRUE")
        assert path_resolver.use_json_logs()
