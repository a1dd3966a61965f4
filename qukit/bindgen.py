from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .catalog import CONTROL_LEVELS, GATE_CATALOG, GateDescriptor, validate_catalog
from .logging import get_logger

logger = get_logger(__name__)

GENERATED_HEADER = "# This file is generated by qukit.bindgen. Do not edit."
DEFAULT_OUTPUT_DIR = Path(__file__).resolve().parent / "gates"
MANIFEST_FILE = "__init__.py"

_CONTROL_DESCRIPTIONS = {0: "", 1: "controlled ", 2: "doubly controlled "}


@dataclass(frozen=True)
class GeneratedArtifact:
    descriptor: GateDescriptor
    controls: int
    function_name: str
    artifact_name: str
    module_name: str
    source: str

    @property
    def file_name(self) -> str:
        return f"{self.module_name}.py"


# --- Naming ---

def function_name(name: str, controls: int) -> str:
    """``pauli_x`` -> ``pauliX`` / ``cPauliX`` / ``ccPauliX``."""
    camel = re.sub(r"_([a-z])", lambda match: match.group(1).upper(), name)
    if controls == 0:
        return camel
    return "c" * controls + camel[:1].upper() + camel[1:]


def artifact_name(name: str, controls: int) -> str:
    """``pauli_x`` -> ``pauli-x`` / ``controlled-pauli-x`` / ``controlled-controlled-pauli-x``."""
    return "controlled-" * controls + name.replace("_", "-")


def module_name(name: str, controls: int) -> str:
    return artifact_name(name, controls).replace("-", "_")


def native_name(name: str, controls: int) -> str:
    return "controlled_" * controls + name


def control_params(controls: int) -> List[str]:
    # A single control is unindexed; two controls are indexed.
    if controls == 1:
        return ["c_qbits"]
    return [f"c_qbits{idx}" for idx in range(controls)]


def target_params(arity: int) -> List[str]:
    if arity == 1:
        return ["qbits"]
    return [f"qbits{idx}" for idx in range(arity)]


def describe(descriptor: GateDescriptor, controls: int) -> str:
    title = " ".join(part.capitalize() for part in descriptor.name.split("_"))
    return f"Applies the {_CONTROL_DESCRIPTIONS[controls]}{title} gate."


# --- Rendering ---

def render_gate(descriptor: GateDescriptor, controls: int) -> str:
    """Renders the dispatcher module for one (gate, control level) pair."""
    func = function_name(descriptor.name, controls)
    verb = native_name(descriptor.name, controls)
    operands = control_params(controls) + target_params(descriptor.arity)
    angles = ["theta"] if descriptor.rotation else []
    classical = ["c_control"] if controls == 0 else []

    params = angles + operands + [f"{arg}=None" for arg in classical] + ["same_step=False"]
    indexed = angles + [f"{operand}[i]" for operand in operands] + classical + ["same_step"]
    scalar = ", ".join(angles + operands)
    joined = ", ".join(operands)

    lines = [
        GENERATED_HEADER,
        "from qukit.dispatch import Shape, broadcast_length, operand_shape",
        "from qukit.engine import native",
        "",
        f'__all__ = ["{func}"]',
        "",
        f'ARTIFACT = "{artifact_name(descriptor.name, controls)}"',
        f"CONTROLS = {controls}",
        "",
        "",
        f"def {func}({', '.join(params)}):",
        f'    """{describe(descriptor, controls)}"""',
        f'    if operand_shape("{func}", {joined}) is Shape.COLLECTION:',
        f"        for i in range(broadcast_length({joined})):",
        f"            {func}({', '.join(indexed)})",
    ]
    if classical:
        lines += [
            "    elif c_control is not None:",
            "        if same_step:",
            f"            native.{verb}_same_step_classically_controlled({scalar}, c_control)",
            "        else:",
            f"            native.{verb}_classically_controlled({scalar}, c_control)",
        ]
    lines += [
        "    elif same_step:",
        f"        native.{verb}_same_step({scalar})",
        "    else:",
        f"        native.{verb}({scalar})",
    ]
    return "\n".join(lines) + "\n"


def render_manifest(artifacts: Sequence[GeneratedArtifact]) -> str:
    """Renders the package module re-exporting every generated function."""
    lines = [GENERATED_HEADER]
    lines += [f"from .{a.module_name} import {a.function_name}" for a in artifacts]
    lines += ["", "ARTIFACTS = {"]
    lines += [f'    "{a.function_name}": "{a.artifact_name}",' for a in artifacts]
    lines += ["}", "", "__all__ = ["]
    lines += [f'    "{a.function_name}",' for a in artifacts]
    lines += ["]"]
    return "\n".join(lines) + "\n"


# --- Expansion ---

def expand_catalog(catalog: Iterable[GateDescriptor] = GATE_CATALOG) -> List[GeneratedArtifact]:
    """Expands the catalog into one artifact per gate and control level.

    The catalog is validated before anything is rendered, so a malformed
    descriptor raises ``CatalogError`` without producing any artifact.
    """
    artifacts = []
    for descriptor in validate_catalog(catalog):
        for controls in CONTROL_LEVELS:
            artifacts.append(GeneratedArtifact(
                descriptor=descriptor,
                controls=controls,
                function_name=function_name(descriptor.name, controls),
                artifact_name=artifact_name(descriptor.name, controls),
                module_name=module_name(descriptor.name, controls),
                source=render_gate(descriptor, controls),
            ))
    return artifacts


def native_entry_points(catalog: Iterable[GateDescriptor] = GATE_CATALOG) -> List[str]:
    """Every engine verb the generated functions can call."""
    verbs = []
    for descriptor in validate_catalog(catalog):
        for controls in CONTROL_LEVELS:
            verb = native_name(descriptor.name, controls)
            verbs += [verb, f"{verb}_same_step"]
            if controls == 0:
                verbs += [f"{verb}_classically_controlled", f"{verb}_same_step_classically_controlled"]
    return verbs


def _is_generated(path: Path) -> bool:
    with open(path, "r", encoding="utf-8") as f:
        return f.readline().rstrip("\n") == GENERATED_HEADER


def generate(output_dir: Optional[Path] = None,
             catalog: Iterable[GateDescriptor] = GATE_CATALOG) -> List[Path]:
    """Writes every gate module and the manifest into ``output_dir``.

    Files in ``output_dir`` that carry the generated header but are no longer
    produced by the catalog are removed. Re-running against an unchanged
    catalog rewrites byte-identical files.

    Returns:
        The written paths, gate modules first and the manifest last.
    """
    output_dir = Path(output_dir) if output_dir is not None else DEFAULT_OUTPUT_DIR
    artifacts = expand_catalog(catalog)
    outputs = {a.file_name: a.source for a in artifacts}
    outputs[MANIFEST_FILE] = render_manifest(artifacts)

    output_dir.mkdir(parents=True, exist_ok=True)
    for stale in sorted(output_dir.glob("*.py")):
        if stale.name not in outputs and _is_generated(stale):
            logger.info("Removing stale binding %s", stale.name)
            stale.unlink()

    written = []
    for file_name, source in outputs.items():
        path = output_dir / file_name
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(source)
        logger.info("Wrote %s", path)
        written.append(path)
    logger.info("Generated %d gate bindings in %s", len(artifacts), output_dir)
    return written
