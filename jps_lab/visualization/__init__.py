# jps_lab/visualization/__init__.py
