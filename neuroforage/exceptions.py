"""Exceptions raised by neuroforage."""


class NeuroforageError(Exception):
    """Base class for all neuroforage errors."""


class ConfigError(NeuroforageError, ValueError):
    """Invalid simulation tuning."""


class TopologyError(NeuroforageError, ValueError):
    """Network topology cannot describe a network."""


class WeightCountError(NeuroforageError, ValueError):
    """Gene sequence length does not match the topology."""


class InputSizeError(NeuroforageError, ValueError):
    """Input vector length does not match a neuron's weight count."""


class ChromosomeLengthError(NeuroforageError, ValueError):
    """Parent chromosomes have different lengths."""


class EmptyPopulationError(NeuroforageError, ValueError):
    """An operation needs at least one individual."""


class SelectionError(NeuroforageError):
    """Selection weights are unusable."""


class EmptySelectionError(SelectionError):
    """Every individual has zero selection weight."""
