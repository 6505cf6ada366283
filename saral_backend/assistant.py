"""
Rule-based chat assistant.

Matches a few Hindi and English keywords in the applicant's message and
answers from canned, bilingual responses filled in with the application's
own status, document counts and loan amount.
"""

from typing import Dict, List, Optional

from saral_backend.models import Language, LoanApplication

BOT_RESPONSES: Dict[str, Dict[str, str]] = {
    "hi": {
        "welcome": "नमस्ते! मैं आपकी लोन एप्लिकेशन में मदद करने के लिए यहाँ हूँ। आप मुझसे कुछ भी पूछ सकते हैं।",
        "status": "आपका आवेदन प्रोसेस हो रहा है। क्या आप स्थिति जानना चाहते हैं?",
        "documents": "आपके दस्तावेज सत्यापित हो रहे हैं। कृपया थोड़ा इंतजार करें।",
        "help": "मैं आपकी निम्नलिखित में मदद कर सकता हूँ:\n• आवेदन की स्थिति\n• दस्तावेज अपलोड\n• लोन की जानकारी\n• सामान्य प्रश्न",
        "thanks": "धन्यवाद! क्या मैं आपकी और कोई मदद कर सकता हूँ?",
        "default": "मैं समझ नहीं पाया। कृपया अपना प्रश्न दोबारा पूछें या 'मदद' टाइप करें।",
    },
    "en": {
        "welcome": "Hello! I'm here to help you with your loan application. Feel free to ask me anything.",
        "status": "Your application is being processed. Would you like to know the current status?",
        "documents": "Your documents are being verified. Please wait a moment.",
        "help": "I can help you with:\n• Application status\n• Document upload\n• Loan information\n• General questions",
        "thanks": "Thank you! Is there anything else I can help you with?",
        "default": "I didn't understand that. Please rephrase your question or type 'help'.",
    },
}

QUICK_REPLIES: Dict[str, List[str]] = {
    "hi": ["मेरी स्थिति क्या है?", "दस्तावेज कैसे अपलोड करें?", "मदद चाहिए", "धन्यवाद"],
    "en": ["What's my status?", "How to upload documents?", "Need help", "Thank you"],
}

STATUS_KEYWORDS = ("status", "स्थिति", "स्टेटस")
DOCUMENT_KEYWORDS = ("document", "दस्तावेज", "papers")
HELP_KEYWORDS = ("help", "मदद", "सहायता")
THANKS_KEYWORDS = ("thank", "धन्यवाद")
AMOUNT_KEYWORDS = ("amount", "राशि", "loan")


def format_inr(amount: int) -> str:
    """Format a rupee amount with Indian digit grouping (1,00,000)."""
    sign = "-" if amount < 0 else ""
    digits = str(abs(int(amount)))
    if len(digits) <= 3:
        return sign + digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return sign + ",".join(groups + [tail])


def welcome_message(language: Language) -> str:
    return BOT_RESPONSES[language]["welcome"]


def _mentions(text: str, keywords) -> bool:
    return any(keyword in text for keyword in keywords)


def _status_reply(application: Optional[LoanApplication], language: Language) -> str:
    if application is not None and application.status == "approved":
        amount = format_inr(application.loan_details.amount) if application.loan_details else "0"
        if language == "hi":
            return f"बधाई हो! आपका लोन अप्रूव हो गया है। राशि: ₹{amount}"
        return f"Congratulations! Your loan has been approved. Amount: ₹{amount}"
    if application is not None and application.status == "rejected":
        if language == "hi":
            return "खुशी की बात नहीं, आपका लोन अप्रूव नहीं हुआ है। कृपया बेहतर दस्तावेज के साथ दोबारा आवेदन करें।"
        return "Unfortunately, your loan was not approved. Please reapply with better documentation."
    return BOT_RESPONSES[language]["status"]


def _documents_reply(application: Optional[LoanApplication], language: Language) -> str:
    verified = application.verified_document_count if application else 0
    total = len(application.documents) if application else 0
    if language == "hi":
        return f"आपके {verified}/{total} दस्तावेज सत्यापित हो गए हैं।"
    return f"{verified}/{total} of your documents have been verified."


def generate_bot_response(
    message: str,
    application: Optional[LoanApplication],
    language: Language,
) -> str:
    """Pick the assistant's reply for a user message.

    Rules are checked in order: status, documents, help, thanks, loan amount.
    Anything else gets the default "didn't understand" reply.
    """
    text = message.lower()
    responses = BOT_RESPONSES[language]

    if _mentions(text, STATUS_KEYWORDS):
        return _status_reply(application, language)

    if _mentions(text, DOCUMENT_KEYWORDS):
        return _documents_reply(application, language)

    if _mentions(text, HELP_KEYWORDS):
        return responses["help"]

    if _mentions(text, THANKS_KEYWORDS):
        return responses["thanks"]

    if _mentions(text, AMOUNT_KEYWORDS) and application is not None and application.loan_details:
        details = application.loan_details
        amount = format_inr(details.amount)
        if language == "hi":
            return f"आपने ₹{amount} का लोन माँगा है {details.purpose} के लिए।"
        return f"You have applied for ₹{amount} loan for {details.purpose}."

    return responses["default"]
