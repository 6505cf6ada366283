"""
MCP Server that wraps the FastAPI app.
Converts the Saral Loan REST endpoints into MCP tools using FastMCP.

Run with: fastmcp run saral_backend/mcp_server.py --transport sse --port 8000
"""

from fastmcp import FastMCP

from saral_backend.app import app
from saral_backend.scoring import generate_ai_decision
from saral_backend.errors import InvalidInputError
from saral_backend.models import DOCUMENT_TYPES

# Convert FastAPI app to MCP server
mcp = FastMCP.from_fastapi(app=app)


@mcp.tool()
def preview_loan_decision(monthly_income: int, loan_amount: int, verified_documents: int = 0) -> dict:
    """Score a hypothetical application without saving anything.

    Useful for answering "would I qualify?" questions before applying.
    """
    application = {
        "id": "preview",
        "personalInfo": {"name": "preview", "phone": "", "monthlyIncome": monthly_income},
        "loanDetails": {"amount": loan_amount, "purpose": "personal", "tenure": 12},
        "documents": [
            {"id": f"doc-{i}", "type": doc_type, "name": "preview", "verified": True}
            for i, doc_type in enumerate(DOCUMENT_TYPES[:max(0, verified_documents)])
        ],
    }
    try:
        decision = generate_ai_decision(application)
    except InvalidInputError as exc:
        return {"error": str(exc)}
    return decision.to_record()


if __name__ == "__main__":
    mcp.run()
