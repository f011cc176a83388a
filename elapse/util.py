import pathlib
from typing import Union

import yaml


def load_yaml_file(file_name: Union[str, pathlib.Path]) -> dict:
    """Load YAML file containing a mapping.

    Parameters
    ----------
    file_name: str or pathlib.Path
        YAML file name.

    Returns
    --------
    dict_data: dict
        YAML contents. Empty if the file is empty.

    Raises
    ------
    ValueError
        If the top level of the file is not a mapping
    """
    with open(file_name, 'r') as f:
        dict_data = yaml.load(f, Loader=yaml.SafeLoader)
    if dict_data is None:
        return {}
    if not isinstance(dict_data, dict):
        raise ValueError(
            f"{file_name} should contain a mapping, "
            f"not {type(dict_data).__name__}"
        )
    return dict_data
