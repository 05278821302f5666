import json
import tempfile
import unittest
from pathlib import Path

from bst_codec.src.base.config_loader import (
    DEFAULT_NODE_KEY_RANGE,
    DEFAULT_NUMBER_NODES,
    RoundTripConfig,
    get_round_trip_config,
    get_round_trip_config_from_file,
)


class TestGetRoundTripConfig(unittest.TestCase):
    def test_values_read(self):
        config = get_round_trip_config({"number_nodes": 5, "node_key_range": 10})
        assert config == RoundTripConfig(number_nodes=5, node_key_range=10)

    def test_defaults_for_missing_keys(self):
        config = get_round_trip_config({})
        assert config.number_nodes == DEFAULT_NUMBER_NODES
        assert config.node_key_range == DEFAULT_NODE_KEY_RANGE

    def test_rejects_bad_values(self):
        for bad in [0, -3, "10", 2.5, True, None]:
            with self.subTest(bad=bad):
                with self.assertRaises(ValueError):
                    get_round_trip_config({"number_nodes": bad})
                with self.assertRaises(ValueError):
                    get_round_trip_config({"node_key_range": bad})


class TestGetRoundTripConfigFromFile(unittest.TestCase):
    def test_packaged_config(self):
        config = get_round_trip_config_from_file()
        assert config == RoundTripConfig(number_nodes=30, node_key_range=100)

    def test_given_path(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            config_path = Path(tmp_dir) / "bst_config.json"
            with open(config_path, "w") as file:
                json.dump({"number_nodes": 7}, file)
            config = get_round_trip_config_from_file(config_path)
        assert config.number_nodes == 7
        assert config.node_key_range == DEFAULT_NODE_KEY_RANGE


if __name__ == "__main__":
    unittest.main()
