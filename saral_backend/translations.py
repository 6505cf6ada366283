"""Hindi / English strings for the Saral Loan screens."""

from typing import Dict

from saral_backend.models import Language

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    # Navigation & Common
    "back": {"hi": "वापस", "en": "Back"},
    "next": {"hi": "आगे", "en": "Next"},
    "submit": {"hi": "जमा करें", "en": "Submit"},
    "loading": {"hi": "लोड हो रहा है...", "en": "Loading..."},
    "fillAllFields": {"hi": "कृपया सभी फील्ड भरें", "en": "Please fill all fields"},
    "applicationNotFound": {"hi": "आवेदन नहीं मिला", "en": "Application not found"},

    # Language Selection
    "selectLanguage": {"hi": "भाषा चुनें", "en": "Select Language"},
    "hindi": {"hi": "हिंदी", "en": "Hindi"},
    "english": {"hi": "अंग्रेजी", "en": "English"},

    # Onboarding
    "welcomeTitle": {"hi": "तुरंत लोन पाएं", "en": "Get Instant Loan"},
    "welcomeSubtitle": {"hi": "AI की मदद से 5 मिनट में लोन अप्रूवल", "en": "AI-powered loan approval in 5 minutes"},
    "startApplication": {"hi": "आवेदन शुरू करें", "en": "Start Application"},
    "personalInfo": {"hi": "व्यक्तिगत जानकारी", "en": "Personal Information"},
    "loanDetails": {"hi": "लोन विवरण", "en": "Loan Details"},
    "name": {"hi": "नाम", "en": "Name"},
    "phone": {"hi": "मोबाइल नंबर", "en": "Mobile Number"},
    "email": {"hi": "ईमेल", "en": "Email"},
    "address": {"hi": "पता", "en": "Address"},
    "occupation": {"hi": "व्यवसाय", "en": "Occupation"},
    "monthlyIncome": {"hi": "मासिक आय", "en": "Monthly Income"},
    "loanAmount": {"hi": "लोन राशि", "en": "Loan Amount"},
    "loanPurpose": {"hi": "लोन का उद्देश्य", "en": "Loan Purpose"},
    "loanTenure": {"hi": "अवधि", "en": "Tenure"},
    "months": {"hi": "महीने", "en": "months"},

    # Loan purposes
    "purpose_personal": {"hi": "व्यक्तिगत", "en": "Personal"},
    "purpose_business": {"hi": "व्यापार", "en": "Business"},
    "purpose_education": {"hi": "शिक्षा", "en": "Education"},
    "purpose_medical": {"hi": "चिकित्सा", "en": "Medical"},
    "purpose_home": {"hi": "घर", "en": "Home"},

    # Chat Interface
    "chatWelcome": {"hi": "नमस्ते! मैं आपकी लोन एप्लिकेशन में मदद करूंगा।", "en": "Hello! I'll help you with your loan application."},
    "chatSupport": {"hi": "चैट सहायता", "en": "Chat Support"},
    "typeHere": {"hi": "यहाँ टाइप करें...", "en": "Type here..."},
    "askName": {"hi": "आपका नाम क्या है?", "en": "What is your name?"},
    "askPhone": {"hi": "आपका मोबाइल नंबर क्या है?", "en": "What is your mobile number?"},
    "askIncome": {"hi": "आपकी मासिक आय कितनी है?", "en": "What is your monthly income?"},
    "askLoanAmount": {"hi": "आपको कितना लोन चाहिए?", "en": "How much loan do you need?"},

    # Document Upload
    "uploadDocuments": {"hi": "दस्तावेज अपलोड करें", "en": "Upload Documents"},
    "aadharCard": {"hi": "आधार कार्ड", "en": "Aadhar Card"},
    "panCard": {"hi": "पैन कार्ड", "en": "PAN Card"},
    "salarySlip": {"hi": "सैलरी स्लिप", "en": "Salary Slip"},
    "bankStatement": {"hi": "बैंक स्टेटमेंट", "en": "Bank Statement"},
    "selfie": {"hi": "सेल्फी", "en": "Selfie"},
    "required": {"hi": "आवश्यक", "en": "Required"},
    "optional": {"hi": "वैकल्पिक", "en": "Optional"},
    "verified": {"hi": "सत्यापित", "en": "Verified"},
    "verificationPending": {"hi": "सत्यापन लंबित", "en": "Verification pending"},
    "uploadAllRequired": {"hi": "कृपया सभी आवश्यक दस्तावेज अपलोड करें", "en": "Please upload all required documents"},
    "uploading": {"hi": "अपलोड हो रहा है...", "en": "Uploading..."},
    "getDecision": {"hi": "निर्णय प्राप्त करें", "en": "Get Decision"},

    # AI Decision
    "processingApplication": {"hi": "आवेदन प्रोसेस हो रहा है...", "en": "Processing application..."},
    "analyzingApplication": {"hi": "AI विश्लेषण चल रहा है...", "en": "AI Analysis in Progress..."},
    "congratulations": {"hi": "बधाई हो!", "en": "Congratulations!"},
    "loanApproved": {"hi": "आपका लोन अप्रूव हो गया है", "en": "Your loan has been approved"},
    "loanRejected": {"hi": "खुशी की बात नहीं", "en": "Unfortunately"},
    "loanRejectedMsg": {"hi": "आपका लोन अप्रूव नहीं हुआ है", "en": "Your loan application was not approved"},
    "analysisReport": {"hi": "AI विश्लेषण रिपोर्ट", "en": "AI Analysis Report"},
    "confidenceScore": {"hi": "विश्वसनीयता स्कोर", "en": "Confidence Score"},
    "riskScore": {"hi": "जोखिम स्कोर", "en": "Risk Score"},
    "decisionFactors": {"hi": "निर्णय के कारक", "en": "Decision Factors"},
    "applicationSummary": {"hi": "आवेदन सारांश", "en": "Application Summary"},
    "applicant": {"hi": "आवेदक", "en": "Applicant"},

    # Admin Dashboard
    "adminDashboard": {"hi": "एडमिन डैशबोर्ड", "en": "Admin Dashboard"},
    "totalApplications": {"hi": "कुल आवेदन", "en": "Total Applications"},
    "approvedApplications": {"hi": "अप्रूव्ड आवेदन", "en": "Approved Applications"},
    "rejectedApplications": {"hi": "अस्वीकृत आवेदन", "en": "Rejected Applications"},
    "pendingReview": {"hi": "समीक्षाधीन", "en": "Pending Review"},
    "totalDisbursed": {"hi": "कुल स्वीकृत राशि", "en": "Total Approved Amount"},
    "statusBreakdown": {"hi": "स्थिति", "en": "Status"},
    "search": {"hi": "नाम, फोन या ID से खोजें", "en": "Search by name, phone or ID"},
    "noApplications": {"hi": "कोई आवेदन नहीं मिला", "en": "No applications found"},
}

DOCUMENT_LABEL_KEYS: Dict[str, str] = {
    "aadhar": "aadharCard",
    "pan": "panCard",
    "salary_slip": "salarySlip",
    "bank_statement": "bankStatement",
    "selfie": "selfie",
}


def t(key: str, lang: Language) -> str:
    """Look up a UI string, falling back to English.

    Raises:
        KeyError: If the key is not in the table
    """
    entry = TRANSLATIONS[key]
    return entry.get(lang) or entry["en"]


def document_label(doc_type: str, lang: Language) -> str:
    return t(DOCUMENT_LABEL_KEYS[doc_type], lang)
