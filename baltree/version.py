version = (0, 1, 0)

def version_str():
    return '.'.join(map(str, version))
