"""Diet Plan Generation Prompt."""

from langchain_core.prompts import PromptTemplate

DIET_PLAN_PROMPT = PromptTemplate.from_template(
    """Generate a detailed personalized diet plan for:
- Age: {age}
- Height: {height}cm
- Current Weight: {weight}kg
- Goal Weight: {goal_weight}kg
- Medical Conditions: {conditions}
- Allergies: {allergies}
- Dietary Restrictions: {dietary_restrictions}
- Fitness Goal: {fitness_goal}
- Daily Calorie Target: {calorie_goal} kcal

Include:
1. Daily calorie recommendation
2. Macro breakdown (protein, carbs, fats)
3. 7-day meal plan with recipes
4. Supplement recommendations
5. Hydration guidelines
6. Meal timing suggestions

Never include foods the user is allergic to."""
)
