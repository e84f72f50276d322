from .picker import list_choices, select_paths, IndexSelection
