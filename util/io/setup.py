import os


def setupOutputDirs(save_name, root="plots"):
    """
    Create all necessary output directories if they don't exist.
    Returns a dictionary of directory paths.
    """
    base_dir = os.path.join(root, save_name)

    # Define directory structure
    dirs = {
        "base": base_dir,
        "plt": os.path.join(base_dir, "plt"),
        "plt_cases": os.path.join(base_dir, "plt", "cases"),
        "logs": os.path.join(base_dir, "logs"),
    }

    # Create all directories
    for dir_path in dirs.values():
        os.makedirs(dir_path, exist_ok=True)

    return dirs
