"""Serviços expostos pela API do Boletim."""
