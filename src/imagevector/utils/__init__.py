"""Image reading helpers."""
