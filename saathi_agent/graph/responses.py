# saathi_agent/graph/responses.py
"""Reply templates and fixed follow-up suggestions"""

DRIVER_NOT_FOUND = "I couldn't find your driver profile. Please try again later."
PROCESSING_ERROR = "Sorry, I'm having trouble processing your request. Please try again."
EMERGENCY_FAILED = "Emergency alert failed. Please try again or call directly."

UNKNOWN_QUERY = (
    "I'm not sure how to help with that. "
    "You can ask me about your earnings, penalties, or other assistance."
)

EARNINGS_TODAY = (
    "Aaj aapne {trips} trip complete kiye aur ₹{total:.2f} kamaye. "
    "Aapka kharcha ₹{expenses:.2f} tha, isliye aapki net kamai hai ₹{net:.2f}."
)
NO_EARNINGS_TODAY = "Aaj ke liye koi earning data uplabdh nahi hai."

PENALTIES_TODAY = "Aapko aaj {count} penalty laga hai: {reasons}"
NO_PENALTY = "Aapko aaj koi penalty nahi lagi hai. Badhai ho!"

CHALLAN_INTRO = "Main aapko challan contest karne mein madad kar sakta hun. Yeh ek step-by-step process hai:"
DIGILOCKER_INTRO = (
    "Main aapko DigiLocker par documents upload karne mein madad kar sakta hun. "
    "Yeh process kuch steps mein puri hogi:"
)
INSURANCE_INTRO = (
    "Main aapko vehicle insurance ke liye apply karne mein madad kar sakta hun. "
    "Yeh process kuch steps mein puri hogi:"
)
STEP = "Step {number}: {text}"

GROWTH_UP = "{percent:.2f} percent behtar"
GROWTH_DOWN = "{percent:.2f} percent kam"
BUSINESS_COMPARISON = (
    "Aaj aapka business pichle hafte ke mukable {growth} raha. "
    "Aaj aapne ₹{today:.2f} kamaye jabki pichle hafte us din ₹{week_ago:.2f} kamaye the."
)
BUSINESS_NO_BASELINE = (
    "Pichle hafte us din aapki net kamai ₹0.00 thi, isliye percent comparison sambhav nahi hai. "
    "Aaj aapne ₹{today:.2f} kamaye."
)
BUSINESS_NO_DATA = "Main business comparison ke liye paryaapt data nahi dhundh paaya."

EMERGENCY_SENT = (
    "Emergency alert bhej diya gaya hai. "
    "Aapki location aur details emergency contacts ko bhej di gayi hain. "
    "Kripya shant rahein aur madad ka intezar karein. "
    "Aapki safety hamari priority hai."
)

# Follow-up prompts
ASK_EARNINGS = "Aaj maine kitna kamaya?"
ASK_PENALTIES = "Kya mujhe koi penalty lagi hai?"
ASK_CHALLAN = "Challan kaise contest karein?"
ASK_EMERGENCY = "Sahayata chahiye"
ASK_COMPARISON = "Pichle hafte ke mukable aaj ka performance kaisa raha?"

HELP_SUGGESTIONS = {
    "earnings": ASK_EARNINGS,
    "penalties": ASK_PENALTIES,
    "challan": ASK_CHALLAN,
    "emergency": ASK_EMERGENCY,
}

UNKNOWN_SUGGESTIONS = {
    "earnings": ASK_EARNINGS,
    "penalties": ASK_PENALTIES,
    "emergency": ASK_EMERGENCY,
}

EARNINGS_SUGGESTIONS = {
    "penalties": ASK_PENALTIES,
    "comparison": ASK_COMPARISON,
}
