"""iSENS-COOP - telemetría ambiental simulada para galpones avícolas.

Núcleo de replay/ventana de telemetría, métricas derivadas (score de
actividad y razones de anomalía) y comparación de consumo contra la
curva estándar.
"""

__version__ = "0.3.0"
