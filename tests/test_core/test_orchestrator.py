"""
Tests suite for RootOrchestrator.

Covers the five initialization phases, the context manager protocol and
device caching through dependency injection, plus one run against the real
services.
"""

# Standard Imports
from unittest.mock import MagicMock, patch

# Third-Party Imports
import pytest
import torch
import yaml

# Internal Imports
from digitforge.core import CONFIG_FILENAME, LOGGER_NAME, Logger, RootOrchestrator


@pytest.fixture
def mock_cfg(tmp_path):
    cfg = MagicMock()
    cfg.hardware.use_deterministic_algorithms = False
    cfg.hardware.effective_num_workers = 2
    cfg.hardware.device = "cpu"
    cfg.training.seed = 11
    cfg.telemetry.model_folder = tmp_path / "models"
    cfg.telemetry.log_level = "INFO"
    return cfg


@pytest.fixture
def injected(mock_cfg):
    deps = {
        "reporter": MagicMock(),
        "log_initializer": MagicMock(return_value=MagicMock()),
        "seed_setter": MagicMock(),
        "static_dir_setup": MagicMock(),
        "config_saver": MagicMock(),
        "device_resolver": MagicMock(return_value=torch.device("cpu")),
    }
    return RootOrchestrator(cfg=mock_cfg, **deps), deps


# ORCHESTRATOR: INITIALIZATION
@pytest.mark.unit
def test_init_extracts_policies(mock_cfg):
    orch = RootOrchestrator(cfg=mock_cfg)

    assert orch.repro_mode is False
    assert orch.num_workers == 2
    assert orch.run_logger is None
    assert orch._device_cache is None


# ORCHESTRATOR: PHASES
@pytest.mark.unit
def test_phases_call_injected_services(injected, mock_cfg):
    orch, deps = injected

    orch.initialize_core_services()

    deps["seed_setter"].assert_called_once_with(11, strict=False)
    deps["static_dir_setup"].assert_called_once_with(mock_cfg.telemetry.model_folder)
    deps["log_initializer"].assert_called_once_with(
        name=LOGGER_NAME, log_dir=mock_cfg.telemetry.model_folder, level="INFO"
    )
    deps["config_saver"].assert_called_once_with(
        data=mock_cfg, yaml_path=mock_cfg.telemetry.model_folder / CONFIG_FILENAME
    )
    deps["reporter"].log_initial_status.assert_called_once()
    assert orch.run_logger is deps["log_initializer"].return_value


@pytest.mark.unit
def test_initialization_is_idempotent(injected):
    orch, deps = injected

    orch.initialize_core_services()
    orch.initialize_core_services()

    deps["seed_setter"].assert_called_once()


@pytest.mark.unit
def test_device_is_resolved_once(injected):
    orch, deps = injected

    assert orch.get_device() == torch.device("cpu")
    assert orch.get_device() == torch.device("cpu")

    deps["device_resolver"].assert_called_once_with("cpu")


@pytest.mark.unit
def test_phase_messages_are_preformatted(injected):
    orch, _ = injected

    with patch("digitforge.core.orchestrator.logger") as mock_logger:
        orch.initialize_core_services()

    messages = [c.args for c in mock_logger.debug.call_args_list]
    assert ("Phase 1: Applying deterministic seeding (seed=11)",) in messages
    assert all(len(args) == 1 for args in messages)


# CONTEXT MANAGER
@pytest.mark.unit
def test_context_manager_initializes_and_cleans_up(injected):
    orch, deps = injected
    handler = MagicMock()
    deps["log_initializer"].return_value.handlers = [handler]

    with orch as entered:
        assert entered is orch

    handler.close.assert_called_once()


@pytest.mark.unit
def test_exceptions_are_not_suppressed(injected):
    orch, _ = injected

    with pytest.raises(RuntimeError):
        with orch:
            raise RuntimeError("inside")


@pytest.mark.unit
def test_failed_phase_triggers_cleanup(injected):
    orch, deps = injected
    deps["config_saver"].side_effect = OSError("disk full")
    orch.cleanup = MagicMock()

    with pytest.raises(OSError):
        orch.__enter__()

    orch.cleanup.assert_called_once()


# INTEGRATION
@pytest.mark.integration
def test_real_services_provision_model_folder(minimal_config):
    model_folder = minimal_config.telemetry.model_folder

    with RootOrchestrator(minimal_config) as orch:
        assert orch.get_device() == torch.device("cpu")
        log_file = Logger.get_log_file()

    assert model_folder.is_dir()
    saved = yaml.safe_load((model_folder / CONFIG_FILENAME).read_text())
    assert saved["training"]["epochs"] == 2
    assert log_file is not None and log_file.parent == model_folder
