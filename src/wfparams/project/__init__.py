"""Workflow orchestration and run logging."""

from .logging_manager import LoggingManager
from .workflow_orchestrator import PipelineState, WorkflowOrchestrator, WorkflowStep

__all__ = ['LoggingManager', 'PipelineState', 'WorkflowOrchestrator', 'WorkflowStep']
