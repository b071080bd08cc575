"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos
  (formulario en pantalla, envío HTTP, almacenamiento local).
- El Core depende de abstracciones y se testea sin navegador ni red.
"""
