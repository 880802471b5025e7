"""Tests for property stores."""

from recwatch.config.properties import ChainedProperties, EnvironmentProperties, FileProperties


class TestPropertyStores:
    """Tests for the credential/property stores."""

    def test_environment_properties(self) -> None:
        store = EnvironmentProperties({"RECIPIENT_EMAIL": "me@example.com", "EMPTY": ""})

        assert store.get_property("RECIPIENT_EMAIL") == "me@example.com"
        assert store.get_property("EMPTY") is None
        assert store.get_property("MISSING") is None

    def test_environment_defaults_to_os_environ(self, monkeypatch) -> None:
        monkeypatch.setenv("SLACK_WEB_HOOK_URL", "https://hooks.example.com/x")

        assert EnvironmentProperties().get_property("SLACK_WEB_HOOK_URL") == (
            "https://hooks.example.com/x"
        )

    def test_file_properties_stringify_and_skip_none(self) -> None:
        store = FileProperties({"SMTP_PASSWORD": 1234, "RECIPIENT_EMAIL": None})

        assert store.get_property("SMTP_PASSWORD") == "1234"
        assert store.get_property("RECIPIENT_EMAIL") is None

    def test_chained_first_non_empty_wins(self) -> None:
        store = ChainedProperties(
            EnvironmentProperties({"A": ""}),
            FileProperties({"A": "from-file", "B": "b"}),
        )

        assert store.get_property("A") == "from-file"
        assert store.get_property("B") == "b"
        assert store.get_property("C") is None
