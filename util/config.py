import yaml
from copy import deepcopy

BASE_CONFIG = "config/base.yaml"

def deep_update(base_dict, update_dict):
    """Recursively update nested dictionaries."""
    for key, value in update_dict.items():
        if isinstance(value, dict) and key in base_dict and isinstance(base_dict[key], dict):
            deep_update(base_dict[key], value)
        else:
            base_dict[key] = value
    return base_dict

def load_yaml(file_path):
    with open(file_path, "r") as f:
        loaded = yaml.safe_load(f)
    # Empty files load as None
    return loaded if loaded is not None else {}

def read_yaml(file_path, base_path=BASE_CONFIG):
    # Load base configuration
    base_config = load_yaml(base_path)
    # Load override configuration
    override_config = load_yaml(file_path)
    # Make a deep copy to avoid modifying the original
    config = deepcopy(base_config)
    # Recursively update with override config
    deep_update(config, override_config)
    return config

def override_yaml(file_path, override, base_path=BASE_CONFIG):
    config = read_yaml(file_path, base_path=base_path)
    # Then update with parameter overrides
    deep_update(config, override)
    return config
