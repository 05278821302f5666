import json
from dataclasses import dataclass
from pathlib import Path


DEFAULT_NUMBER_NODES = 30
DEFAULT_NODE_KEY_RANGE = 100


@dataclass(frozen=True)
class RoundTripConfig:
    number_nodes: int = DEFAULT_NUMBER_NODES
    node_key_range: int = DEFAULT_NODE_KEY_RANGE


def _positive_int(json_data_from_file: dict, name: str, default: int) -> int:
    value = json_data_from_file.get(name, default)
    # True and False are rejected as counts
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return value


def get_round_trip_config(json_data_from_file: dict) -> RoundTripConfig:
    return RoundTripConfig(
        number_nodes=_positive_int(
            json_data_from_file, "number_nodes", DEFAULT_NUMBER_NODES
        ),
        node_key_range=_positive_int(
            json_data_from_file, "node_key_range", DEFAULT_NODE_KEY_RANGE
        ),
    )


ROUND_TRIP_CONFIG_FILE = "bst_config.json"


def get_round_trip_config_from_file(config_path: Path | None = None) -> RoundTripConfig:
    if config_path is None:
        config_path = Path(__file__).parent / ".." / ".." / ROUND_TRIP_CONFIG_FILE
    with open(config_path, "r") as file:
        json_data_from_file = json.load(file)
    return get_round_trip_config(json_data_from_file)
