"""Tests for environment-driven configuration."""

import pytest

from workshopguard.config import WorkshopConfig

ENV_VARS = [
    "WORKSHOPGUARD_MAX_CONCURRENT_JOBS",
    "WORKSHOPGUARD_MAX_JOBS_PER_TECHNICIAN",
    "WORKSHOPGUARD_PORT",
    "WORKSHOPGUARD_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestFromEnv:
    def test_defaults(self):
        config = WorkshopConfig.from_env()
        assert config == WorkshopConfig(
            max_concurrent_jobs=20,
            max_jobs_per_technician=5,
            port=8000,
            log_level="info",
        )

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("WORKSHOPGUARD_MAX_CONCURRENT_JOBS", "40")
        monkeypatch.setenv("WORKSHOPGUARD_MAX_JOBS_PER_TECHNICIAN", "8")
        monkeypatch.setenv("WORKSHOPGUARD_LOG_LEVEL", "DEBUG")
        config = WorkshopConfig.from_env()
        assert config.max_concurrent_jobs == 40
        assert config.max_jobs_per_technician == 8
        assert config.log_level == "debug"

    def test_blank_value_uses_default(self, monkeypatch):
        monkeypatch.setenv("WORKSHOPGUARD_PORT", " ")
        assert WorkshopConfig.from_env().port == 8000

    def test_non_integer_rejected(self, monkeypatch):
        monkeypatch.setenv("WORKSHOPGUARD_MAX_CONCURRENT_JOBS", "lots")
        with pytest.raises(ValueError, match="must be an integer"):
            WorkshopConfig.from_env()

    def test_zero_capacity_rejected(self, monkeypatch):
        monkeypatch.setenv("WORKSHOPGUARD_MAX_JOBS_PER_TECHNICIAN", "0")
        with pytest.raises(ValueError, match="must be positive"):
            WorkshopConfig.from_env()


class TestReadings:
    def test_workshop_reading_falls_back_to_default(self):
        config = WorkshopConfig(max_concurrent_jobs=12)
        assert config.workshop_reading(3).max == 12
        assert config.workshop_reading(3, 30).max == 30

    def test_technician_reading_falls_back_to_default(self):
        config = WorkshopConfig(max_jobs_per_technician=4)
        reading = config.technician_reading(2)
        assert (reading.current, reading.max) == (2, 4)
