# Role: Scenario catalog. Five keyword-checklist scenarios plus the scripted parts-ordering role-play.
# The engine picks one uniformly at random per playthrough.

from __future__ import annotations

from typing import Dict, List

from trainer.models.scenario import ChecklistItem, EmailTask, Scenario, ScenarioKind

PARTS_ORDERING_ADVANCED_ID = "parts_ordering_advanced"

SCENARIOS: List[Scenario] = [
    Scenario(
        id="parts_delivery",
        name="Parts Ordering",
        counterpart_name="BYD Parts Dept",
        checklist=[
            ChecklistItem(
                id="cat_num",
                description="Provide Catalog Number (BYD-FB-2024)",
                keywords=["byd", "fb", "2024", "number"],
                suggestion="I need to check availability for BYD-FB-2024.",
            ),
            ChecklistItem(
                id="ask_date",
                description="Ask for 'Delivery Date'",
                keywords=["when", "date", "arrive", "delivery", "time"],
                suggestion="When will it be delivered?",
            ),
        ],
        hints={"cat_num": "What is the part number?", "ask_date": "Ask when it arrives."},
        email_task=EmailTask(
            subject_hint="Order Confirmation: BYD-FB-2024",
            required_keywords=["confirmed", "tuesday", "order"],
            instruction="Write an email to your team confirming the part arrives Next Tuesday.",
        ),
    ),
    Scenario(
        id="jotform_status",
        name="JotForm Follow-up",
        counterpart_name="BYD Regional Manager",
        checklist=[
            ChecklistItem(
                id="platform",
                description="Mention 'JotForm'",
                keywords=["jotform", "system", "app"],
                suggestion="Please check JotForm.",
            ),
            ChecklistItem(
                id="quantity",
                description="Mention '40 pending cars'",
                keywords=["40", "forty", "cars", "estimates"],
                suggestion="We have 40 estimates waiting.",
            ),
            ChecklistItem(
                id="action",
                description="Ask to 'Approve'",
                keywords=["approve", "accept", "confirm", "sign"],
                suggestion="Please approve them so we can start.",
            ),
        ],
        hints={"platform": "Which system?", "quantity": "How many?", "action": "What do you need me to do?"},
        email_task=EmailTask(
            subject_hint="Urgent: 40 Approvals",
            required_keywords=["approved", "40", "jotform"],
            instruction="Send a 'Written Confirmation' email summarizing that he agreed to approve the cars.",
        ),
        intro_text=(
            "Hello Darek. I'm looking at the system and I see a lot of pending estimates. We need to move these."
        ),
    ),
    Scenario(
        id="invoice_check",
        name="Invoice Verification",
        counterpart_name="BYD Finance Dept",
        checklist=[
            ChecklistItem(
                id="doc_type",
                description="Mention 'October Invoices'",
                keywords=["invoice", "bill", "october"],
                suggestion="Did you receive the October invoices?",
            ),
            ChecklistItem(
                id="action",
                description="Ask if 'Received/Processed'",
                keywords=["receive", "get", "process", "status"],
                suggestion="Have they been processed?",
            ),
        ],
        hints={"doc_type": "Which invoices?", "action": "What do you want to know?"},
        email_task=EmailTask(
            subject_hint="Payment Status: October",
            required_keywords=["received", "processed", "october"],
            instruction="Write an email to your boss confirming BYD has received the invoices.",
        ),
        intro_text=(
            "Hi Darek. Just doing our monthly reconciliation. "
            "I'm missing confirmation on the last batch of documents."
        ),
    ),
    Scenario(
        id="repair_timeline",
        name="Repair Timeline",
        counterpart_name="Impatient Client",
        checklist=[
            ChecklistItem(
                id="location",
                description="Explain 'Part is in China'",
                keywords=["china", "asia", "abroad"],
                suggestion="The part is currently in China.",
            ),
            ChecklistItem(
                id="warehouse",
                description="Mention 'Not in Holland'",
                keywords=["holland", "netherlands", "europe", "stock"],
                suggestion="There is no stock in the Holland warehouse.",
            ),
            ChecklistItem(
                id="delay",
                description="Give Timeline (2 Weeks)",
                keywords=["2 weeks", "two weeks", "14 days"],
                suggestion="It will take 2 weeks to arrive.",
            ),
        ],
        hints={"location": "Where is the part?", "warehouse": "Is it in Europe?", "delay": "How long?"},
        email_task=EmailTask(
            subject_hint="Delay Notification: White BYD",
            required_keywords=["china", "2 weeks", "delay"],
            instruction="Send a formal delay notification email to the client.",
        ),
        intro_text=(
            "Hello? Is this Darek? I've been waiting for my white BYD for three days. Where is the part?"
        ),
    ),
    Scenario(
        id="comm_channel",
        name="Communication Platform",
        counterpart_name="BYD Representative",
        checklist=[
            ChecklistItem(
                id="refusal",
                description="Refuse 'WhatsApp'",
                keywords=["no", "not", "prefer", "better", "instead"],
                suggestion="Please do not use WhatsApp.",
            ),
            ChecklistItem(
                id="method",
                description="Request 'Email'",
                keywords=["email", "mail", "outlook"],
                suggestion="Please send it via Email.",
            ),
            ChecklistItem(
                id="reason",
                description="Reason: 'Documentation'",
                keywords=["document", "record", "history", "file", "policy"],
                suggestion="We need it for documentation purposes.",
            ),
        ],
        hints={"refusal": "Is WhatsApp okay?", "method": "What should I use?", "reason": "Why email?"},
        email_task=EmailTask(
            subject_hint="Communication Policy",
            required_keywords=["email", "documentation", "policy"],
            instruction="Write a polite email confirming that all future files must be sent via email.",
        ),
        intro_text="Hi. I'm sending you the photos via WhatsApp now. Is that okay? It's much faster for me.",
        negation_reply="Okay, okay, no WhatsApp then. But how am I supposed to send you the files?",
    ),
    Scenario(
        id=PARTS_ORDERING_ADVANCED_ID,
        name="Parts Ordering (Advanced)",
        counterpart_name="BYD Logistics / Fleet Mgr",
        kind=ScenarioKind.SCRIPTED,
        checklist=[
            # Keywords live in the parts script; the step machine marks these items.
            ChecklistItem(
                id="identify",
                description="Identify the Part",
                suggestion="I need to check availability for [Code].",
            ),
            ChecklistItem(
                id="curveball",
                description="Clarify Details (Qty/VIN/Loc)",
                suggestion="Confirm the details requested.",
            ),
            ChecklistItem(
                id="negotiate",
                description="Negotiate / Confirm Delivery",
                suggestion="Negotiate for faster delivery if needed.",
            ),
        ],
        hints={
            "identify": "Ask for the catalog number.",
            "curveball": "Answer the specific question asked.",
            "negotiate": "Don't accept long delays without checking alternatives.",
        },
        email_task=EmailTask(
            subject_hint="Order Confirmation / Escalation",
            required_keywords=["confirmed", "order"],
            instruction="Write a professional email confirming the final arrangement.",
        ),
    ),
]

_BY_ID: Dict[str, Scenario] = {s.id: s for s in SCENARIOS}


def get_scenario(scenario_id: str) -> Scenario:
    scenario = _BY_ID.get(scenario_id)
    if scenario is None:
        raise KeyError(f"Unknown scenario id: {scenario_id}")
    return scenario
