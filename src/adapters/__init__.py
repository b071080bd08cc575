"""Adaptadores de infraestructura (HTTP/CMS, almacenamiento, exportación)."""
