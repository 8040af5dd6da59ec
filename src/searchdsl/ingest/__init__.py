# Copyright 2026 SearchDSL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Ingest processor domain: processor kinds, pipelines and their Params models."""

from searchdsl.ingest.processors import (
    LowercaseProcessor,
    LowercaseProcessorParams,
    Processor,
    ProcessorKind,
    Processors,
    RemoveProcessor,
    RemoveProcessorParams,
    RenameProcessor,
    RenameProcessorParams,
    SetProcessor,
    SetProcessorParams,
    TrimProcessor,
    TrimProcessorParams,
    UppercaseProcessor,
    UppercaseProcessorParams,
)

__all__ = [
    "ProcessorKind",
    "Processor",
    "Processors",
    "LowercaseProcessor",
    "LowercaseProcessorParams",
    "RemoveProcessor",
    "RemoveProcessorParams",
    "RenameProcessor",
    "RenameProcessorParams",
    "SetProcessor",
    "SetProcessorParams",
    "TrimProcessor",
    "TrimProcessorParams",
    "UppercaseProcessor",
    "UppercaseProcessorParams",
]
