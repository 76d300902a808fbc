from typing import Dict, List, Optional

from studio.domains.writing.entities import Template


TEMPLATES: List[Template] = [
    Template(
        id="novel",
        name="Novel",
        description="Full-length fiction with chapter structure",
        category="Fiction",
        ai_features=["Character development", "Plot assistance", "Dialogue enhancement"],
        document_name="New Novel",
        content=(
            "<h1>Chapter 1</h1><p>The story begins here...</p>"
            "<p><em>Use the AI assistant to help develop your characters, plot, and dialogue.</em></p>"
        ),
    ),
    Template(
        id="screenplay",
        name="Screenplay",
        description="Film and TV script formatting",
        category="Scripts",
        ai_features=["Scene structure", "Character arcs", "Dialogue polish"],
        document_name="New Screenplay",
        content=(
            "<p><strong>FADE IN:</strong></p><p><strong>EXT. LOCATION - DAY</strong></p>"
            "<p>Scene description goes here.</p>"
            "<p><strong>CHARACTER</strong><br>Dialogue goes here.</p>"
            "<p><em>The AI can help format your screenplay and develop scenes.</em></p>"
        ),
    ),
    Template(
        id="business-plan",
        name="Business Plan",
        description="Comprehensive business strategy document",
        category="Business",
        ai_features=["Market analysis", "Financial projections", "Executive summary"],
        document_name="Business Plan",
        content=(
            "<h1>Executive Summary</h1><h2>Company Overview</h2><h2>Market Analysis</h2>"
            "<h2>Financial Projections</h2>"
            "<p><em>AI assistance available for market research and financial modeling.</em></p>"
        ),
    ),
    Template(
        id="thesis",
        name="Academic Thesis",
        description="Research paper with citations",
        category="Academic",
        ai_features=["Literature review", "Citation management", "Methodology"],
    ),
    Template(
        id="memoir",
        name="Memoir",
        description="Personal life story narrative",
        category="Non-fiction",
        ai_features=["Story structure", "Emotional depth", "Timeline organization"],
    ),
    Template(
        id="technical-manual",
        name="Technical Manual",
        description="Step-by-step instructional guide",
        category="Technical",
        ai_features=["Process optimization", "Clarity enhancement", "User-friendly language"],
    ),
]

_BY_ID: Dict[str, Template] = {template.id: template for template in TEMPLATES}


def list_templates() -> List[Template]:
    return list(TEMPLATES)


def get_template(template_id: str) -> Optional[Template]:
    return _BY_ID.get(template_id)
