"""Utility helpers for treino."""
