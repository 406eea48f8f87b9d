"""
Workflow Package - Extension Request Flow.

    - ExtensionRequestFlow: Form -> payment handoff state machine
    - FlowState / FlowStateError: States and invalid-transition error
    - build_sub_funds: Sub-fund lines for multi-fund filings
"""

from filings_dashboard.workflow.extension_request import (
    ExtensionRequestFlow,
    FlowState,
    FlowStateError,
    build_sub_funds,
)

__all__ = ["ExtensionRequestFlow", "FlowState", "FlowStateError", "build_sub_funds"]
