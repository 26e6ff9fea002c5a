"""
Test Suite for the training driver and phases.
"""

# Third-Party Imports
import pytest
import torch

# Internal Imports
from digitforge.core import Config, RootOrchestrator, load_model_weights
from digitforge.models import get_model
from digitforge.pipeline import run_training_phase
from digitforge.pipeline.training import main


def _cli(mnist_trees, model_folder, *extra):
    train, valid = mnist_trees
    return [
        "-t", str(train),
        "-v", str(valid),
        "-m", str(model_folder),
        "-b", "4",
        "-e", "2",
        "--network", "fully_connected",
        "--hidden-sizes", "16",
        "--device", "cpu",
        "--num-workers", "0",
        "--no-tqdm",
        *extra,
    ]


@pytest.mark.integration
def test_training_phase_writes_checkpoints(minimal_config):
    with RootOrchestrator(minimal_config) as orch:
        last, losses, metrics, model = run_training_phase(orch)

    folder = minimal_config.telemetry.model_folder
    assert last == folder / "fully_connected-0002.pt"
    assert (folder / "fully_connected-0001.pt").exists()
    assert (folder / "config.yaml").exists()
    assert len(losses) == len(metrics) == 2

    restored = get_model(torch.device("cpu"), minimal_config.network, verbose=False)
    assert load_model_weights(restored, last, torch.device("cpu"))["Epoch"] == "2"


@pytest.mark.integration
def test_too_many_labels_for_network(minimal_config, image_writer):
    for extra in range(3, 12):
        image_writer(minimal_config.train_data.root_folder / f"{extra}" / "x.png")
        image_writer(minimal_config.val_data.root_folder / f"{extra}" / "x.png")

    with RootOrchestrator(minimal_config) as orch:
        with pytest.raises(ValueError, match="only 10 outputs"):
            run_training_phase(orch)


@pytest.mark.integration
def test_main_trains_from_cli(mnist_trees, tmp_path):
    model_folder = tmp_path / "cli_models"

    main(_cli(mnist_trees, model_folder))

    assert sorted(p.name for p in model_folder.glob("*.pt")) == [
        "fully_connected-0001.pt",
        "fully_connected-0002.pt",
    ]


@pytest.mark.integration
def test_main_exits_on_missing_folder(mnist_trees, tmp_path):
    argv = _cli(mnist_trees, tmp_path / "m")
    argv[1] = str(tmp_path / "missing")

    with pytest.raises(SystemExit) as exc_info:
        main(argv)

    assert exc_info.value.code == 1


@pytest.mark.integration
def test_main_exits_on_empty_dataset(mnist_trees, tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()
    argv = _cli(mnist_trees, tmp_path / "m")
    argv[1] = str(empty)

    with pytest.raises(SystemExit) as exc_info:
        main(argv)

    assert exc_info.value.code == 1


@pytest.mark.integration
def test_main_with_yaml_recipe(temp_yaml_config, tmp_path):
    main(["--config", str(temp_yaml_config), "--no-tqdm"])

    cfg = Config.from_yaml(temp_yaml_config)
    assert len(list(cfg.telemetry.model_folder.glob("*.pt"))) == cfg.training.epochs


@pytest.mark.integration
def test_main_rejects_custom_sizes_for_preset(mnist_trees, tmp_path):
    train, valid = mnist_trees
    argv = ["-t", str(train), "-v", str(valid), "-m", str(tmp_path / "m"), "--hidden-sizes", "16"]

    with pytest.raises(SystemExit) as exc_info:
        main(argv)

    assert exc_info.value.code == 1


@pytest.mark.integration
def test_main_exits_on_missing_recipe(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        main(["--config", str(tmp_path / "absent.yaml")])

    assert exc_info.value.code == 1


@pytest.mark.integration
def test_main_exits_on_malformed_recipe(tmp_path):
    recipe = tmp_path / "broken.yaml"
    recipe.write_text("train_data: [unclosed\n", encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        main(["--config", str(recipe)])

    assert exc_info.value.code == 1


@pytest.mark.integration
def test_main_exits_on_label_mismatch(mnist_trees, image_writer, tmp_path):
    _, valid = mnist_trees
    image_writer(valid / "9" / "x.png")

    with pytest.raises(SystemExit) as exc_info:
        main(_cli(mnist_trees, tmp_path / "m"))

    assert exc_info.value.code == 1
    assert not list((tmp_path / "m").glob("*.pt"))
