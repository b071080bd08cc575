"""Servicios de orquestación (formulario de contacto, consentimiento de cookies)."""
