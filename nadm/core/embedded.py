# Rewritten by scripts/embed_core.py. Keep the placeholder on its own line.
SCRIPT = "{{CORE_SH}}"
