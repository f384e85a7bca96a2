"""Configuração: logging estruturado e settings por domínio."""
