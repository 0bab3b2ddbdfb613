# attack_sim/content/__init__.py
