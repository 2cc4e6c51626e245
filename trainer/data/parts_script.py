# Role: Content for the branching parts-ordering role-play: agent names, parts catalog, opening contexts,
# clarification curveballs, outcomes (D2 is the stock-empty escalation) and the negotiation script.

from __future__ import annotations

from trainer.models.script import (
    Curveball,
    NegotiationScript,
    OpeningContext,
    Outcome,
    OutcomeType,
    Part,
    PartsScript,
)

ESCALATION_OUTCOME_ID = "D2"

PARTS_SCRIPT = PartsScript(
    agent_names=[
        "Wei Chen", "Li Zhang", "Jun Liu", "Min Wang", "Tao Yang",
        "Yan Zhao", "Lei Huang", "Jing Wu", "Hui Zhou", "Fang Xu",
    ],
    parts=[
        Part(id="A1", name="Front Bumper", code="BYD-FB-2024"),
        Part(id="A2", name="Rear Left Door", code="BYD-RLD-889"),
        Part(id="A3", name="Windshield", code="BYD-WS-115"),
        Part(id="A4", name="Headlight Assembly", code="BYD-HL-LED-04"),
        Part(id="A5", name="Side Mirror L", code="BYD-SM-L-22"),
        Part(id="A6", name="Radiator Grille", code="BYD-RG-Sport-X"),
        Part(id="A7", name="Rear Bumper", code="BYD-RB-Sen-09"),
        Part(id="A8", name="Fender Liner", code="BYD-FL-Right"),
        Part(id="A9", name="Hood Latch", code="BYD-HL-Mech-01"),
        Part(id="A10", name="Tailgate Strut", code="BYD-TS-Pwr"),
    ],
    contexts=[
        OpeningContext(
            id="B1",
            text="Hi Darek. Responding to your ticket. Which catalog number do you need me to check availability for?",
        ),
        OpeningContext(
            id="B2",
            text=(
                "Darek, quick heads up, the truck leaves in 10 minutes. "
                "If you need that part added, I need the catalog number NOW."
            ),
        ),
        OpeningContext(
            id="B3",
            text=(
                "Hi. We saw your report that we sent the wrong item yesterday. "
                "What is the CORRECT catalog number you need for the replacement?"
            ),
        ),
    ],
    curveballs=[
        Curveball(
            id="C1",
            text="Got the code. My screen lists the order as **1 unit**. Is that correct, or do you need **2**?",
            keywords=["1", "one", "2", "two", "quantity", "confirm", "units"],
            hint="Confirm the quantity (1 or 2).",
        ),
        Curveball(
            id="C2",
            text=(
                "Hold on. There are two variants (Sport vs Std). "
                "Please give me the **last 4 digits of the VIN** to verify."
            ),
            keywords=["vin", "8842", "1234", "9999", "number"],
            hint="Provide a VIN (e.g. 8842).",
        ),
        Curveball(
            id="C3",
            text="Found it. Quickly, is this going to the **Piaseczno** shop or **Praga**?",
            keywords=["piaseczno", "praga", "warsaw", "mszczonow", "location", "shop"],
            hint="Choose a location.",
        ),
    ],
    outcomes={
        "D1": Outcome(
            id="D1",
            text="Perfect. It's booked. Arrival is confirmed for **next Friday**.",
            type=OutcomeType.SUCCESS,
        ),
        "D2": Outcome(
            id="D2",
            text=(
                "Unfortunately, stock is empty in EU. It's coming from Shenzhen, China "
                "(**2 weeks delay**). Can you accept this?"
            ),
            type=OutcomeType.NEGOTIATION,
        ),
        "D3": Outcome(
            id="D3",
            text="Lucky day. We actually have a spare in Warsaw. It will arrive **tomorrow morning**.",
            type=OutcomeType.SUCCESS,
        ),
    },
    negotiation=NegotiationScript(
        offer_tradeoff=(
            "I understand. The only alternative is **Air Freight** (4-5 days), "
            "but this adds a **35% cost premium**."
        ),
        block_authority=(
            "Darek, I can't take your authorization for a premium that high. "
            "I need the **Fleet Manager (Mr. Nowak)** to approve it. Please ask him."
        ),
        manager_intro=(
            "Darek, I'm Mr. Nowak. Logistics says you want Air Freight (+35%). "
            "Before I pay that, **justify it**. Is the car blocking the line, or is the customer just impatient?"
        ),
        manager_approval=(
            "Understood. Customer reputation is key. I authorize **Air Freight**. I'll email Logistics now."
        ),
    ),
    accept_keywords=["ok", "fine", "wait", "standard", "agree", "accept"],
    reject_keywords=["no", "cant", "can't", "long", "urgent", "alternative", "faster", "quick"],
    back_down_keywords=["accept", "delay", "wait", "standard", "nevermind", "cancel"],
    escalate_keywords=["nowak", "manager", "boss", "ask him", "connect"],
    self_authorize_keywords=["approve", "do it", "send it", "decision", "authorize", "pay", "air", "freight"],
    valid_reason_keywords=["customer", "impatient", "reputation", "angry", "wait", "service", "brand"],
)
