"""
Feed-forward neural network used as an animal's brain.

Layers keep their parameters as float32 torch tensors: a weight matrix of
shape [out, in] and a bias vector of shape [out]. Each neuron computes
relu(bias + sum(inputs * weights)).

Flattened gene layout (the contract with the genetic algorithm):
for each layer, for each neuron: bias, then every input weight in order.
"""

from typing import Iterable, List, Sequence

import numpy as np
import torch

from neuroforage.exceptions import InputSizeError, TopologyError, WeightCountError


def _as_inputs(inputs) -> torch.Tensor:
    """Convert a sequence/ndarray/tensor of floats into a 1-D float32 tensor."""
    if isinstance(inputs, torch.Tensor):
        return inputs.to(torch.float32).reshape(-1)
    return torch.as_tensor(np.asarray(inputs, dtype=np.float32).reshape(-1))


class Neuron:
    """A single neuron: one bias and one weight per input."""

    def __init__(self, bias: float, weights):
        self.bias = float(bias)
        self.weights = _as_inputs(weights)
        if self.weights.numel() == 0:
            raise TopologyError("A neuron needs at least one input weight")

    def propagate(self, inputs) -> float:
        inputs = _as_inputs(inputs)
        if inputs.numel() != self.weights.numel():
            raise InputSizeError(
                f"Expected {self.weights.numel()} inputs, got {inputs.numel()}"
            )
        output = torch.dot(inputs, self.weights)
        return max(0.0, float(self.bias + output))

    def __repr__(self):
        return f"Neuron(bias={self.bias:.4f}, weights={self.weights.tolist()})"


class Layer:
    """A layer of neurons sharing the same input arity."""

    def __init__(self, weights: torch.Tensor, biases: torch.Tensor):
        if weights.dim() != 2 or biases.dim() != 1 or weights.shape[0] != biases.shape[0]:
            raise TopologyError(
                f"Inconsistent layer shapes: weights {tuple(weights.shape)}, biases {tuple(biases.shape)}"
            )
        if weights.shape[0] == 0 or weights.shape[1] == 0:
            raise TopologyError("A layer needs at least one neuron and one input")
        self.weights = weights.to(torch.float32)
        self.biases = biases.to(torch.float32)

    @classmethod
    def from_neurons(cls, neurons: Sequence[Neuron]) -> "Layer":
        if not neurons:
            raise TopologyError("A layer needs at least one neuron")
        arity = neurons[0].weights.numel()
        if any(neuron.weights.numel() != arity for neuron in neurons):
            raise TopologyError("All neurons in a layer must have the same number of weights")
        weights = torch.stack([neuron.weights for neuron in neurons])
        biases = torch.tensor([neuron.bias for neuron in neurons], dtype=torch.float32)
        return cls(weights, biases)

    @classmethod
    def random(cls, rng: np.random.Generator, input_size: int, output_size: int) -> "Layer":
        # Column 0 holds the bias, the rest are input weights (gene order).
        params = rng.uniform(-1.0, 1.0, size=(output_size, input_size + 1)).astype(np.float32)
        return cls.from_params(params)

    @classmethod
    def from_params(cls, params: np.ndarray) -> "Layer":
        """Build a layer from a [out, 1 + in] array of (bias, weights...) rows."""
        params = torch.from_numpy(np.ascontiguousarray(params, dtype=np.float32))
        return cls(params[:, 1:].clone(), params[:, 0].clone())

    @property
    def input_size(self) -> int:
        return self.weights.shape[1]

    @property
    def output_size(self) -> int:
        return self.weights.shape[0]

    @property
    def neurons(self) -> List[Neuron]:
        return [Neuron(float(b), w) for b, w in zip(self.biases, self.weights)]

    def propagate(self, inputs: torch.Tensor) -> torch.Tensor:
        if inputs.numel() != self.input_size:
            raise InputSizeError(f"Expected {self.input_size} inputs, got {inputs.numel()}")
        return torch.relu(self.biases + torch.mv(self.weights, inputs))

    def params(self) -> torch.Tensor:
        """[out, 1 + in] tensor with each neuron's bias followed by its weights."""
        return torch.cat([self.biases.unsqueeze(1), self.weights], dim=1)


class Network:
    """Layered feed-forward network."""

    def __init__(self, layers: List[Layer]):
        if not layers:
            raise TopologyError("A network needs at least one layer")
        for previous, layer in zip(layers, layers[1:]):
            if previous.output_size != layer.input_size:
                raise TopologyError(
                    f"Layer output size {previous.output_size} does not feed "
                    f"next layer input size {layer.input_size}"
                )
        self.layers = layers

    @staticmethod
    def _check_topology(topology: Sequence[int]):
        if len(topology) < 2:
            raise TopologyError(
                f"Topology needs at least 2 layer sizes, got {list(topology)}"
            )
        if any(int(size) < 1 for size in topology):
            raise TopologyError(f"Layer sizes must be positive, got {list(topology)}")

    @classmethod
    def random(cls, rng: np.random.Generator, topology: Sequence[int]) -> "Network":
        """
        Create a network with every weight and bias drawn uniformly from [-1, 1].

        Args:
            rng: Random generator
            topology: Neuron count per layer, input layer first (at least 2 entries)
        """
        cls._check_topology(topology)
        layers = [
            Layer.random(rng, int(inputs), int(outputs))
            for inputs, outputs in zip(topology, topology[1:])
        ]
        return cls(layers)

    @classmethod
    def from_weights(cls, topology: Sequence[int], weights: Iterable[float]) -> "Network":
        """
        Rebuild a network from a flat gene sequence produced by weights().

        Raises:
            WeightCountError: if the sequence is too short or too long for the topology
        """
        cls._check_topology(topology)
        genes = np.fromiter(weights, dtype=np.float32)

        layers = []
        offset = 0
        for inputs, outputs in zip(topology, topology[1:]):
            inputs, outputs = int(inputs), int(outputs)
            count = outputs * (inputs + 1)
            if offset + count > genes.size:
                raise WeightCountError(
                    f"Not enough weights: topology {list(topology)} needs more than {genes.size}"
                )
            layers.append(Layer.from_params(genes[offset:offset + count].reshape(outputs, inputs + 1)))
            offset += count

        if offset != genes.size:
            raise WeightCountError(
                f"Too many weights: topology {list(topology)} uses {offset}, got {genes.size}"
            )
        return cls(layers)

    @property
    def topology(self) -> List[int]:
        return [self.layers[0].input_size] + [layer.output_size for layer in self.layers]

    def propagate(self, inputs) -> torch.Tensor:
        """Feed inputs through every layer and return the output layer's activations."""
        activations = _as_inputs(inputs)
        with torch.no_grad():
            for layer in self.layers:
                activations = layer.propagate(activations)
        return activations

    def weights(self) -> np.ndarray:
        """Flatten biases and weights into a float32 gene array."""
        return torch.cat([layer.params().reshape(-1) for layer in self.layers]).numpy().copy()

    def __repr__(self):
        return f"Network(topology={self.topology})"
