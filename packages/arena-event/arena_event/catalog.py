"""Built-in random events."""
from __future__ import annotations

from arena_event.types import Choice, EventDef, EventType, Outcome

P, N, X, S = EventType.POSITIVE, EventType.NEGATIVE, EventType.NEUTRAL, EventType.SPECIAL

DEFAULT_EVENTS: tuple[EventDef, ...] = (
    EventDef(
        "whale_alert", "Whale Alert", P, 0.15,
        description="A whale just followed you on Twitter. They want to chat.",
        min_reputation=200, time_limit=30,
        choices=(
            Choice(
                "accept", "Accept the call",
                Outcome(0.7, reputation=100, tokens=500, affinity={"whale": 20}),
                Outcome(0.3, reputation=-20,
                        message="The whale was testing you. They went silent."),
                hint="Could lead to alpha or a new connection",
            ),
            Choice(
                "public", "Ask for alpha publicly",
                Outcome(0.2, reputation=200, tokens=1000, xp=300),
                Outcome(0.8, reputation=-150,
                        message="The whale blocks you. Others noticed..."),
                hint="High risk - could backfire spectacularly",
            ),
            Choice(
                "ignore", "Politely decline",
                Outcome(1.0, message="You stay focused on your work."),
                hint="Safe but no reward",
            ),
        ),
    ),
    EventDef(
        "alpha_leak", "Alpha Incoming", P, 0.1,
        description="A trusted source DMs you with insider info about an upcoming announcement.",
        min_level=5, time_limit=45,
        choices=(
            Choice(
                "keep_secret", "Keep it to yourself",
                Outcome(0.9, tokens=300, affinity={"oracle": 15}),
                Outcome(0.1, message="The info was wrong. Oh well."),
                hint="Maintain trust, personal benefit",
            ),
            Choice(
                "share_team", "Share with your team",
                Outcome(0.85, reputation=75, xp=150),
                Outcome(0.15, reputation=-50, message="Someone leaked it. Trust broken."),
                hint="Build team loyalty",
            ),
            Choice(
                "verify", "Verify before acting",
                Outcome(1.0, xp=100, message="Smart move. Always verify."),
                hint="Safe approach", stat_bonus={"str": 5},
            ),
        ),
    ),
    EventDef(
        "viral_moment", "Going Viral", P, 0.12,
        description="One of your posts is blowing up! Quick, capitalize on it!",
        archetype_bonus={"creator": 0.3, "marketer": 0.2}, time_limit=20,
        choices=(
            Choice(
                "ride_wave", "Ride the wave",
                Outcome(0.75, reputation=150, xp=200, influence=30),
                Outcome(0.25, reputation=20, message="The moment passed."),
                hint="Post follow-up content",
            ),
            Choice(
                "promote_project", "Promote your project",
                Outcome(0.6, reputation=100, tokens=400),
                Outcome(0.4, reputation=-30, message="People saw through the shill."),
                hint="Convert attention to value",
            ),
            Choice(
                "stay_humble", "Stay humble",
                Outcome(0.9, reputation=80, affinity={"sarah": 10}),
                Outcome(0.1, message="The moment fades quietly."),
                hint="Let it speak for itself",
            ),
        ),
    ),
    EventDef(
        "fud_attack", "FUD Attack", N, 0.18,
        description="Someone's spreading lies about your project on CT!",
        min_reputation=100, time_limit=30,
        choices=(
            Choice(
                "clap_back", "Clap back publicly",
                Outcome(0.4, reputation=100, xp=150),
                Outcome(0.6, reputation=-100, message="The drama spiraled. You look bad."),
                hint="High risk, could escalate",
            ),
            Choice(
                "receipts", "Post receipts calmly",
                Outcome(0.8, reputation=50, xp=100, affinity={"marcus": 10}),
                Outcome(0.2, reputation=-20, message="Some believed the FUD anyway."),
                hint="Facts over feelings", stat_bonus={"str": 3, "com": 3},
            ),
            Choice(
                "silence", "Stay silent",
                Outcome(1.0, reputation=-30, message="The noise dies down eventually."),
                hint="Avoid drama but lose some rep",
            ),
        ),
    ),
    EventDef(
        "bug_discovered", "Critical Bug", N, 0.1,
        description="A community member found a bug in the smart contract!",
        min_level=3, time_limit=45,
        choices=(
            Choice(
                "fix_quietly", "Fix it quietly",
                Outcome(0.6, xp=200, message="Fixed before anyone noticed."),
                Outcome(0.4, reputation=-200,
                        message="Someone noticed the stealth fix. Trust broken."),
                hint="Risky if discovered", stat_required={"dev": 10},
            ),
            Choice(
                "transparent", "Announce and fix",
                Outcome(0.85, reputation=30, xp=150, affinity={"marcus": 15}),
                Outcome(0.15, reputation=-50, message="Some users panicked anyway."),
                hint="Transparent approach",
            ),
            Choice(
                "bounty", "Offer a bug bounty",
                Outcome(0.95, reputation=100, tokens=-200, xp=100),
                Outcome(0.05, tokens=-200, message="Bounty paid but more bugs found..."),
                hint="Cost tokens but build trust",
            ),
        ),
    ),
    EventDef(
        "team_drama", "Team Conflict", N, 0.12,
        description="Two team members are having a public argument. People are watching.",
        time_limit=60,
        choices=(
            Choice(
                "mediate", "Mediate privately",
                Outcome(0.7, reputation=40, affinity={"jordan": 10, "sarah": 10}),
                Outcome(0.3, reputation=-20, message="They both blame you now."),
                hint="Diplomatic approach", stat_bonus={"cha": 5},
            ),
            Choice(
                "pick_side", "Support one side",
                Outcome(0.5, affinity={"random": 30}),
                Outcome(0.5, affinity={"random": -30}, message="You chose poorly."),
                hint="Make an ally and an enemy",
            ),
            Choice(
                "ignore", "Stay out of it",
                Outcome(0.6, message="It blows over."),
                Outcome(0.4, reputation=-30, message="People think you lack leadership."),
                hint="Not your problem",
            ),
        ),
    ),
    EventDef(
        "crossroads", "Crossroads", X, 0.08,
        description="Two projects want you at the same time. Choose wisely.",
        min_level=8, time_limit=60,
        choices=(
            Choice(
                "both", "Try to juggle both",
                Outcome(0.35, xp=400, tokens=300, reputation=100),
                Outcome(0.65, reputation=-100,
                        message="You burned out and disappointed everyone."),
                hint="Risky but double rewards",
            ),
            Choice(
                "gaming", "Join the Gaming guild",
                Outcome(1.0, xp=200, reputation=100, path="gaming"),
                hint="Community focus, high energy",
            ),
            Choice(
                "defi", "Join the DeFi project",
                Outcome(1.0, xp=200, tokens=300, path="defi"),
                hint="Technical focus, steady growth",
            ),
        ),
    ),
    EventDef(
        "mentor_offer", "Mentorship Offer", X, 0.07,
        description="A respected builder offers to mentor you, but it requires commitment.",
        min_reputation=300, time_limit=90,
        choices=(
            Choice(
                "accept", "Accept mentorship",
                Outcome(0.9, xp=500, stat_boost={"str": 2, "cha": 2},
                        affinity={"dmitri": 25}),
                Outcome(0.1, message="Schedule conflicts. Maybe next time."),
                hint="Long-term investment",
            ),
            Choice(
                "negotiate", "Negotiate terms",
                Outcome(0.5, xp=600, stat_boost={"str": 3, "cha": 3}),
                Outcome(0.5, reputation=-20, message="They withdrew the offer."),
                hint="Try for better deal", stat_bonus={"cha": 5},
            ),
            Choice(
                "decline", "Politely decline",
                Outcome(1.0, message="You forge your own path."),
                hint="Stay independent",
            ),
        ),
    ),
    EventDef(
        "oracle_riddle", "The Oracle's Test", S, 0.03,
        description="The mysterious Oracle appears with a cryptic challenge.",
        min_level=10, time_limit=120,
        choices=(
            Choice(
                "solve", "Attempt the riddle",
                Outcome(0.5, xp=1000, tokens=500, special="oracle_blessing",
                        affinity={"oracle": 50}),
                Outcome(0.5, xp=100,
                        message="The Oracle smiles mysteriously and vanishes."),
                hint="Test your wisdom", stat_required={"str": 12},
            ),
            Choice(
                "decline", "Bow and step back",
                Outcome(1.0, affinity={"oracle": 10}, message="The Oracle nods approvingly."),
                hint="Show respect",
            ),
        ),
    ),
    EventDef(
        "airdrop_rush", "Airdrop Alert!", S, 0.05,
        description="A massive airdrop just went live! You have seconds to act!",
        time_limit=5,
        choices=(
            Choice(
                "fast", "CLAIM NOW!",
                Outcome(0.4, tokens=1000, xp=200),
                Outcome(0.6, message="Too slow. Bots got there first."),
                hint="Speed is everything",
            ),
            Choice(
                "verify", "Check if legit first",
                Outcome(0.7, tokens=500, xp=150),
                Outcome(0.3, message="It was legit but you missed it while checking."),
                hint="Could be a scam", stat_bonus={"str": 10},
            ),
            Choice(
                "skip", "Skip it",
                Outcome(1.0, message="Probably a scam anyway... right?"),
                hint="Not worth the risk",
            ),
        ),
    ),
)
