"""
lead_scorer/ai_engine/prompt_templates.py — LangChain prompt for intent classification.

One chain:
  INTENT_CLASSIFICATION — offer + prospect profile → two-line "Intent / Reasoning" reply
"""

from langchain_core.prompts import ChatPromptTemplate


SYSTEM_INSTRUCTION = (
    "You are a B2B sales qualification expert. Provide concise, actionable analysis."
)


# ── Intent Classification ─────────────────────────────────────────────────────

INTENT_CLASSIFICATION_PROMPT = ChatPromptTemplate.from_messages([
    ("system", SYSTEM_INSTRUCTION),
    (
        "human",
        """You are a B2B sales qualification expert. Analyze if this prospect is a good fit for our product.

PRODUCT/OFFER:
Name: {offer_name}
Value Propositions: {value_props}
Ideal Use Cases: {ideal_use_cases}

PROSPECT:
Name: {lead_name}
Role: {role}
Company: {company}
Industry: {industry}
Location: {location}
LinkedIn Bio: {linkedin_bio}

TASK:
Classify this prospect's buying intent as High, Medium, or Low.
Consider:
1. Does their role indicate decision-making power?
2. Does their industry match our ideal use cases?
3. Does their background suggest they would benefit from our product?

Respond in this exact format:
Intent: [High/Medium/Low]
Reasoning: [1-2 sentences explaining your classification]""",
    ),
])
