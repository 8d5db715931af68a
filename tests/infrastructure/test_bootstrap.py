"""Tests for settings and the composition root."""

from ims.infrastructure.bootstrap import change_notifier, product_repository
from ims.infrastructure.config import Settings
from ims.infrastructure.fallback_product_repository import FallbackProductRepository
from ims.infrastructure.persistence.local_product_repository import (
    LocalProductRepository,
)


class TestSettings:

    def test_reads_prefixed_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("IMS_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("IMS_REMOTE_ENABLED", "true")
        monkeypatch.setenv("IMS_API_BASE_URL", "https://inventory.example.com")

        settings = Settings()

        assert settings.data_dir == tmp_path
        assert settings.remote_enabled is True
        assert settings.api_base_url == "https://inventory.example.com"
        assert settings.products_file == tmp_path / "products.json"

    def test_defaults(self, monkeypatch):
        for name in ("IMS_REMOTE_ENABLED", "IMS_POLL_INTERVAL", "IMS_CHANGE_PROBABILITY"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.remote_enabled is False
        assert settings.poll_interval == 1.0
        assert settings.change_probability == 0.05


class TestBootstrap:

    def test_local_repository_by_default(self, tmp_path):
        repo = product_repository(Settings(_env_file=None, data_dir=tmp_path))
        assert isinstance(repo, LocalProductRepository)
        assert len(repo.list_all()) == 4

    def test_unseeded_store(self, tmp_path):
        settings = Settings(_env_file=None, data_dir=tmp_path, seed_demo_data=False)
        assert product_repository(settings).list_all() == []

    def test_remote_switch_selects_fallback_repository(self, tmp_path):
        settings = Settings(_env_file=None, data_dir=tmp_path, remote_enabled=True)
        assert isinstance(product_repository(settings), FallbackProductRepository)

    def test_change_notifier_subscription_can_be_cancelled(self, tmp_path):
        notifier = change_notifier(
            Settings(_env_file=None, data_dir=tmp_path, poll_interval=60)
        )
        subscription = notifier.subscribe(lambda: None)
        subscription.cancel()
        assert not subscription.active
