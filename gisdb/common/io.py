from os.path import normpath, expanduser


def clean_path(path):
    return normpath(expanduser(path))
