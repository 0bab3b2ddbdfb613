# attack_sim/engine/__init__.py
