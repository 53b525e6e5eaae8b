"""Сервисный слой: обращения к внешним картографическим сервисам."""
