"""HTTP serving for fitted models.

Import ``iris_softmax.serving.app`` directly; it fits a model at startup.
"""
