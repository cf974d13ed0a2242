"""Namespace for lint configuration; it holds no modules at present."""