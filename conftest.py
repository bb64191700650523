# Puts the repository root on sys.path, so that tests can import `src.zkgadgets` and `tests`.
