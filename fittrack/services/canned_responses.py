# fittrack/services/canned_responses.py
from types import MappingProxyType
from typing import Optional

CANNED_RESPONSES = MappingProxyType({
    "workout": (
        "Here are some great workout suggestions:\n\n"
        "1. **Full Body Strength** (3 days/week)\n"
        "   - Squats: 4x5\n"
        "   - Bench Press: 4x5\n"
        "   - Rows: 4x5\n\n"
        "2. **Cardio Days** (2 days/week)\n"
        "   - 30 min moderate intensity running\n"
        "   - Or 20 min HIIT training\n\n"
        "3. **Rest Days**: 2 days for recovery\n\n"
        "Remember to stay hydrated and stretch!"
    ),
    "nutrition": (
        "Key nutrition tips for fitness:\n\n"
        "1. **Protein**: 0.7-1g per pound of body weight\n"
        "2. **Carbs**: Focus on complex carbs (oats, rice, sweet potatoes)\n"
        "3. **Fats**: Include healthy fats (avocado, nuts, olive oil)\n"
        "4. **Hydration**: 3-4 liters of water daily\n"
        "5. **Meal Timing**: Eat within 2 hours post-workout\n\n"
        "Consult with a nutritionist for personalized advice!"
    ),
    "weight loss": (
        "Effective weight loss strategy:\n\n"
        "1. **Calorie Deficit**: Aim for 300-500 calorie deficit\n"
        "2. **Exercise**: 150 min moderate or 75 min vigorous activity/week\n"
        "3. **Protein**: High protein diet aids satiety\n"
        "4. **Sleep**: 7-9 hours nightly\n"
        "5. **Consistency**: Small changes over time work best\n\n"
        "Expect 1-2 lbs per week of healthy weight loss."
    ),
})

FALLBACK_RESPONSE = (
    "I'm here to help with fitness advice! Ask me about:\n"
    "- Workout routines\n"
    "- Nutrition and meal planning\n"
    "- Weight loss strategies\n"
    "- Exercise techniques\n\n"
    "Note: The AI service is currently limited. For detailed responses, "
    "try asking about workouts, nutrition, or weight loss."
)


def find_canned_response(text: str) -> Optional[str]:
    """First keyword (in table order) contained in ``text`` wins."""
    lowered = (text or "").lower()
    for keyword, answer in CANNED_RESPONSES.items():
        if keyword in lowered:
            return answer
    return None
