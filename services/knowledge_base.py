# services/knowledge_base.py
"""Static process guides, canned phrases and the voice command catalog"""

from typing import Dict, List, Optional, Tuple


PROCESS_GUIDES: Dict[str, Tuple[str, ...]] = {
    "contest_challan": (
        "Visit the traffic police website",
        "Click on 'Contest Challan' option",
        "Enter your vehicle number and challan number",
        "Upload necessary documents",
        "Submit your explanation",
        "Pay any required fees",
        "Track your application status",
    ),
    "digilocker_upload": (
        "Open DigiLocker app or website",
        "Login with your mobile number",
        "Select 'Upload Documents'",
        "Choose document type",
        "Select file from your device",
        "Add description if needed",
        "Click 'Upload'",
    ),
    "apply_insurance": (
        "Contact your insurance provider",
        "Provide vehicle details",
        "Submit required documents",
        "Choose insurance plan",
        "Make payment",
        "Receive policy documents",
    ),
}

COMMON_PHRASES: Dict[str, str] = {
    "greeting": "Namaste! Main aapka Porter Saathi hoon. Aaj main aapki kya madad kar sakta hoon?",
    "thanks": "Aapka swagat hai! Kya aapko koi aur madad chahiye?",
    "help": "Main aapki madad earnings, penalties, challan, documents, aur emergency situations ke liye kar sakta hoon.",
}

VOICE_COMMANDS: Tuple[str, ...] = (
    "Aaj ka kharcha kaat ke kitna kamaya?",
    "Mera business pichle hafte se behtar hai ya nahi?",
    "Kya mujhe koi penalty lagi hai?",
    "Challan kaise contest karein?",
    "DigiLocker par documents kaise upload karein?",
    "Sahayata chahiye",
)


class KnowledgeBase:
    """Read-only access to guides and phrases"""

    def __init__(
        self,
        guides: Optional[Dict[str, Tuple[str, ...]]] = None,
        phrases: Optional[Dict[str, str]] = None,
        commands: Optional[Tuple[str, ...]] = None,
    ):
        self._guides = dict(guides if guides is not None else PROCESS_GUIDES)
        self._phrases = dict(phrases if phrases is not None else COMMON_PHRASES)
        self._commands = tuple(commands if commands is not None else VOICE_COMMANDS)

    def guide(self, name: str) -> List[str]:
        """Ordered steps of a guide; empty if the guide is unknown"""
        return list(self._guides.get(name, ()))

    def phrase(self, name: str) -> str:
        return self._phrases.get(name, "")

    def voice_commands(self) -> List[str]:
        return list(self._commands)
