"""Configuração: logging estruturado e settings da Cloud API."""
