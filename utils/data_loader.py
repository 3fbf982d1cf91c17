import gzip

def load_sequence(path, size_limit=None):
    """Read a gzip corpus as raw bytes, optionally only its first size_limit bytes."""
    with gzip.open(path, 'rb') as f:
        if size_limit:
            return f.read(size_limit)
        return f.read()
