"""Periodized discrete wavelet transforms and the filter banks they use."""
