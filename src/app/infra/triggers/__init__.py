"""Sinks de trigger concretos."""

from app.infra.triggers.sinks import HttpTriggerSink, LoggingTriggerSink

__all__ = ["HttpTriggerSink", "LoggingTriggerSink"]
