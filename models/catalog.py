"""Static workout and meal catalogs."""

from typing import Dict, List, Optional

from schemas.diet_log import Meal
from schemas.workout import (
    Exercise,
    PlanItem,
    PopulatedWorkoutTemplate,
    ResolvedPlanItem,
    WorkoutCategory,
    WorkoutTemplate,
)

WORKOUT_CATEGORIES: List[WorkoutCategory] = [
    WorkoutCategory(id="strength", name="Strength Training", icon="💪", color="#FF6B6B",
                    description="Build muscle and increase strength"),
    WorkoutCategory(id="cardio", name="Cardio", icon="🏃", color="#4ECDC4",
                    description="Improve endurance and burn calories"),
    WorkoutCategory(id="yoga", name="Yoga & Flexibility", icon="🧘", color="#A78BFA",
                    description="Increase flexibility and reduce stress"),
    WorkoutCategory(id="hiit", name="HIIT", icon="⚡", color="#FFD60A",
                    description="High intensity interval training"),
    WorkoutCategory(id="core", name="Core & Abs", icon="🎯", color="#F97316",
                    description="Strengthen your core muscles"),
    WorkoutCategory(id="stretching", name="Stretching", icon="🤸", color="#10B981",
                    description="Improve mobility and recovery"),
]

# id, name, category, muscle_group, equipment, difficulty, calories_per_min, instructions
_EXERCISE_ROWS = [
    ("ex1", "Barbell Squat", "strength", "legs", "barbell", "intermediate", 8,
     "Stand with feet shoulder-width apart. Lower your body by bending knees and hips. Keep chest up and back straight. Push through heels to return to start."),
    ("ex2", "Bench Press", "strength", "chest", "barbell", "intermediate", 7,
     "Lie on bench, grip barbell slightly wider than shoulders. Lower bar to chest, then press up to starting position."),
    ("ex3", "Deadlift", "strength", "back", "barbell", "advanced", 9,
     "Stand with feet hip-width apart, barbell over mid-foot. Bend at hips and knees, grip bar. Lift by extending hips and knees together."),
    ("ex4", "Pull-ups", "strength", "back", "pullup bar", "intermediate", 8,
     "Hang from bar with overhand grip. Pull yourself up until chin is over bar. Lower with control."),
    ("ex5", "Dumbbell Rows", "strength", "back", "dumbbell", "beginner", 6,
     "Place one knee and hand on bench. Hold dumbbell in other hand, pull to hip. Lower with control."),
    ("ex6", "Shoulder Press", "strength", "shoulders", "dumbbell", "beginner", 5,
     "Hold dumbbells at shoulder height. Press overhead until arms are straight. Lower with control."),
    ("ex7", "Bicep Curls", "strength", "arms", "dumbbell", "beginner", 4,
     "Stand with dumbbells at sides. Curl weights to shoulders, keeping elbows stationary. Lower slowly."),
    ("ex8", "Tricep Dips", "strength", "arms", "bench", "beginner", 5,
     "Place hands on bench behind you. Lower body by bending elbows. Push back up to start."),
    ("ex9", "Lunges", "strength", "legs", "bodyweight", "beginner", 6,
     "Step forward with one leg, lowering hips until both knees are bent 90 degrees. Push back to start."),
    ("ex10", "Leg Press", "strength", "legs", "machine", "beginner", 7,
     "Sit in machine with feet on platform. Push platform away by extending legs. Return with control."),
    ("ex11", "Running", "cardio", "full body", "none", "beginner", 12,
     "Maintain a steady pace. Land mid-foot and keep arms relaxed. Breathe rhythmically."),
    ("ex12", "Cycling", "cardio", "legs", "bike", "beginner", 10,
     "Maintain steady cadence of 80-100 RPM. Keep core engaged and back straight."),
    ("ex13", "Jump Rope", "cardio", "full body", "jump rope", "beginner", 14,
     "Jump with both feet, keeping jumps small. Use wrists to turn rope, not arms."),
    ("ex14", "Rowing", "cardio", "full body", "rowing machine", "intermediate", 11,
     "Push with legs first, then pull with arms. Return by extending arms, then bending knees."),
    ("ex15", "Stair Climber", "cardio", "legs", "stair machine", "intermediate", 10,
     "Step naturally without holding rails. Keep posture upright and core engaged."),
    ("ex16", "Burpees", "hiit", "full body", "none", "intermediate", 15,
     "From standing, drop to squat with hands on floor. Jump feet back to plank. Do push-up. Jump feet forward and jump up with arms overhead."),
    ("ex17", "Mountain Climbers", "hiit", "core", "none", "beginner", 12,
     "Start in plank position. Alternate driving knees toward chest rapidly while keeping hips down."),
    ("ex18", "Box Jumps", "hiit", "legs", "plyo box", "intermediate", 13,
     "Stand facing box. Jump onto box landing softly with both feet. Step down and repeat."),
    ("ex19", "Kettlebell Swings", "hiit", "full body", "kettlebell", "intermediate", 14,
     "Hinge at hips, swing kettlebell between legs. Drive hips forward to swing bell to chest height."),
    ("ex20", "Battle Ropes", "hiit", "upper body", "battle ropes", "intermediate", 13,
     "Hold rope ends in each hand. Create waves by alternating arm movements rapidly."),
    ("ex21", "Plank", "core", "core", "none", "beginner", 4,
     "Hold push-up position with body in straight line. Engage core and hold."),
    ("ex22", "Crunches", "core", "core", "none", "beginner", 5,
     "Lie on back with knees bent. Curl shoulders toward hips, keeping lower back on floor."),
    ("ex23", "Russian Twists", "core", "core", "none", "beginner", 6,
     "Sit with knees bent, lean back slightly. Rotate torso side to side, touching floor each side."),
    ("ex24", "Leg Raises", "core", "core", "none", "intermediate", 5,
     "Lie flat, hands under hips. Raise legs to 90 degrees, lower slowly without touching floor."),
    ("ex25", "Dead Bug", "core", "core", "none", "beginner", 4,
     "Lie on back, arms up, knees bent 90°. Lower opposite arm and leg, return, alternate."),
    ("ex26", "Downward Dog", "yoga", "full body", "mat", "beginner", 3,
     "From hands and knees, lift hips up and back. Press heels toward floor, keep spine long."),
    ("ex27", "Warrior I", "yoga", "legs", "mat", "beginner", 3,
     "Step one foot forward into lunge. Raise arms overhead, square hips forward."),
    ("ex28", "Tree Pose", "yoga", "legs", "mat", "beginner", 2,
     "Stand on one leg, place other foot on inner thigh. Bring hands to prayer or overhead."),
    ("ex29", "Child's Pose", "yoga", "back", "mat", "beginner", 2,
     "Kneel, sit back on heels. Fold forward, arms extended or by sides."),
    ("ex30", "Sun Salutation", "yoga", "full body", "mat", "intermediate", 5,
     "Flow through mountain pose, forward fold, plank, cobra, downward dog sequence."),
    ("ex31", "Hamstring Stretch", "stretching", "legs", "none", "beginner", 2,
     "Sit with one leg extended. Reach toward toes, keeping back straight. Hold 30 seconds."),
    ("ex32", "Quad Stretch", "stretching", "legs", "none", "beginner", 2,
     "Stand on one leg, pull other heel toward glutes. Hold 30 seconds each side."),
    ("ex33", "Hip Flexor Stretch", "stretching", "hips", "none", "beginner", 2,
     "Kneel on one knee, other foot forward. Push hips forward gently. Hold 30 seconds."),
    ("ex34", "Chest Stretch", "stretching", "chest", "none", "beginner", 2,
     "Stand in doorway, arms on frame at 90°. Step through doorway to stretch chest."),
    ("ex35", "Shoulder Stretch", "stretching", "shoulders", "none", "beginner", 2,
     "Bring one arm across chest. Use other arm to press it closer. Hold 30 seconds."),
]

EXERCISES: List[Exercise] = [
    Exercise(
        id=row[0],
        name=row[1],
        category=row[2],
        muscle_group=row[3],
        equipment=row[4],
        difficulty=row[5],
        calories_per_min=row[6],
        instructions=row[7],
    )
    for row in _EXERCISE_ROWS
]


def _plan(*items) -> List[PlanItem]:
    """Build plan items from (exercise_id, sets, reps, rest_seconds) tuples."""
    return [
        PlanItem(exercise_id=exercise_id, sets=sets, reps=reps, rest_seconds=rest)
        for exercise_id, sets, reps, rest in items
    ]


WORKOUT_TEMPLATES: List[WorkoutTemplate] = [
    WorkoutTemplate(
        id="wt1", name="Full Body Strength", category="strength", duration=45,
        difficulty="intermediate", calories=350,
        exercises=_plan(("ex1", 4, 10, 90), ("ex2", 4, 10, 90), ("ex4", 3, 8, 60),
                        ("ex6", 3, 12, 60), ("ex9", 3, 12, 60)),
    ),
    WorkoutTemplate(
        id="wt2", name="Upper Body Focus", category="strength", duration=40,
        difficulty="intermediate", calories=280,
        exercises=_plan(("ex2", 4, 10, 90), ("ex4", 4, 8, 90), ("ex5", 3, 12, 60),
                        ("ex6", 3, 12, 60), ("ex7", 3, 15, 45), ("ex8", 3, 12, 45)),
    ),
    WorkoutTemplate(
        id="wt3", name="Lower Body Power", category="strength", duration=50,
        difficulty="intermediate", calories=400,
        exercises=_plan(("ex1", 5, 8, 120), ("ex3", 4, 6, 120), ("ex9", 4, 12, 60),
                        ("ex10", 3, 15, 60)),
    ),
    WorkoutTemplate(
        id="wt4", name="HIIT Blast", category="hiit", duration=25,
        difficulty="advanced", calories=320,
        exercises=_plan(("ex16", 4, 10, 30), ("ex17", 4, 30, 20), ("ex18", 4, 12, 30),
                        ("ex19", 4, 15, 30)),
    ),
    WorkoutTemplate(
        id="wt5", name="Core Crusher", category="core", duration=20,
        difficulty="beginner", calories=150,
        exercises=_plan(("ex21", 3, 60, 30), ("ex22", 3, 20, 30), ("ex23", 3, 20, 30),
                        ("ex24", 3, 15, 30), ("ex25", 3, 16, 30)),
    ),
    WorkoutTemplate(
        id="wt6", name="Morning Yoga Flow", category="yoga", duration=30,
        difficulty="beginner", calories=100,
        exercises=_plan(("ex30", 5, 1, 10), ("ex26", 3, 30, 10), ("ex27", 2, 30, 10),
                        ("ex28", 2, 30, 10), ("ex29", 2, 60, 0)),
    ),
    WorkoutTemplate(
        id="wt7", name="Cardio Endurance", category="cardio", duration=40,
        difficulty="intermediate", calories=450,
        exercises=_plan(("ex11", 1, 20, 60), ("ex12", 1, 15, 60), ("ex13", 3, 100, 60)),
    ),
    WorkoutTemplate(
        id="wt8", name="Recovery Stretch", category="stretching", duration=15,
        difficulty="beginner", calories=50,
        exercises=_plan(("ex31", 2, 30, 10), ("ex32", 2, 30, 10), ("ex33", 2, 30, 10),
                        ("ex34", 2, 30, 10), ("ex35", 2, 30, 10)),
    ),
]

# id, name, category, calories, protein, carbs, fat, fiber, ingredients
_MEAL_ROWS = [
    ("meal1", "Oatmeal with Berries", "breakfast", 350, 12, 58, 8, 8, ["oats", "mixed berries", "honey", "almond milk"]),
    ("meal2", "Egg White Omelette", "breakfast", 280, 28, 8, 14, 2, ["egg whites", "spinach", "tomatoes", "feta cheese"]),
    ("meal3", "Greek Yogurt Parfait", "breakfast", 320, 20, 42, 8, 4, ["greek yogurt", "granola", "honey", "strawberries"]),
    ("meal4", "Avocado Toast", "breakfast", 380, 12, 35, 22, 10, ["whole grain bread", "avocado", "eggs", "cherry tomatoes"]),
    ("meal5", "Protein Smoothie Bowl", "breakfast", 420, 30, 52, 12, 8, ["protein powder", "banana", "almond butter", "berries", "granola"]),
    ("meal6", "Grilled Chicken Salad", "lunch", 450, 42, 20, 22, 6, ["chicken breast", "mixed greens", "avocado", "olive oil dressing"]),
    ("meal7", "Quinoa Buddha Bowl", "lunch", 520, 18, 65, 20, 12, ["quinoa", "chickpeas", "roasted vegetables", "tahini"]),
    ("meal8", "Turkey Wrap", "lunch", 420, 32, 38, 16, 4, ["turkey breast", "whole wheat tortilla", "hummus", "vegetables"]),
    ("meal9", "Salmon Poke Bowl", "lunch", 550, 35, 55, 18, 6, ["salmon", "sushi rice", "edamame", "seaweed", "avocado"]),
    ("meal10", "Lentil Soup", "lunch", 380, 22, 52, 8, 16, ["lentils", "carrots", "celery", "tomatoes", "spices"]),
    ("meal11", "Grilled Salmon", "dinner", 480, 45, 15, 26, 4, ["salmon fillet", "asparagus", "quinoa", "lemon"]),
    ("meal12", "Chicken Stir Fry", "dinner", 420, 38, 35, 14, 6, ["chicken", "broccoli", "bell peppers", "brown rice", "soy sauce"]),
    ("meal13", "Lean Beef Tacos", "dinner", 520, 35, 42, 22, 8, ["lean ground beef", "corn tortillas", "lettuce", "salsa", "cheese"]),
    ("meal14", "Vegetable Curry", "dinner", 450, 15, 55, 20, 10, ["mixed vegetables", "coconut milk", "curry spices", "basmati rice"]),
    ("meal15", "Grilled Chicken Breast", "dinner", 380, 48, 12, 14, 4, ["chicken breast", "sweet potato", "steamed broccoli"]),
    ("meal16", "Protein Bar", "snack", 220, 20, 25, 8, 3, ["protein blend", "nuts", "chocolate"]),
    ("meal17", "Apple with Almond Butter", "snack", 200, 5, 28, 10, 5, ["apple", "almond butter"]),
    ("meal18", "Greek Yogurt", "snack", 150, 15, 12, 4, 0, ["greek yogurt"]),
    ("meal19", "Mixed Nuts", "snack", 180, 6, 8, 16, 2, ["almonds", "walnuts", "cashews"]),
    ("meal20", "Protein Shake", "snack", 180, 25, 8, 4, 1, ["whey protein", "almond milk"]),
]

MEALS: List[Meal] = [
    Meal(
        id=row[0],
        name=row[1],
        category=row[2],
        calories=row[3],
        protein=row[4],
        carbs=row[5],
        fat=row[6],
        fiber=row[7],
        ingredients=row[8],
    )
    for row in _MEAL_ROWS
]

_EXERCISES_BY_ID: Dict[str, Exercise] = {exercise.id: exercise for exercise in EXERCISES}
_TEMPLATES_BY_ID: Dict[str, WorkoutTemplate] = {template.id: template for template in WORKOUT_TEMPLATES}
_MEALS_BY_ID: Dict[str, Meal] = {meal.id: meal for meal in MEALS}


def get_exercise(exercise_id: str) -> Optional[Exercise]:
    return _EXERCISES_BY_ID.get(exercise_id)


def get_category(category_id: str) -> Optional[WorkoutCategory]:
    return next((category for category in WORKOUT_CATEGORIES if category.id == category_id), None)


def get_meal(meal_id: str) -> Optional[Meal]:
    return _MEALS_BY_ID.get(meal_id)


def resolve_plan(items: List[PlanItem]) -> List[ResolvedPlanItem]:
    """Attach the catalog exercise to each plan item; unknown ids resolve to None."""
    return [ResolvedPlanItem(**item.model_dump(), exercise=get_exercise(item.exercise_id)) for item in items]


def populate_template(template: WorkoutTemplate) -> PopulatedWorkoutTemplate:
    return PopulatedWorkoutTemplate(
        **template.model_dump(exclude={"exercises"}),
        exercises=resolve_plan(template.exercises),
    )


def get_workout_with_exercises(template_id: str) -> Optional[PopulatedWorkoutTemplate]:
    template = _TEMPLATES_BY_ID.get(template_id)
    if template is None:
        return None
    return populate_template(template)


def filter_exercises(
    category: Optional[str] = None,
    muscle_group: Optional[str] = None,
    difficulty: Optional[str] = None,
) -> List[Exercise]:
    exercises = EXERCISES
    if category:
        exercises = [e for e in exercises if e.category == category]
    if muscle_group:
        exercises = [e for e in exercises if e.muscle_group == muscle_group]
    if difficulty:
        exercises = [e for e in exercises if e.difficulty.value == difficulty]
    return exercises


def filter_templates(category: Optional[str] = None, difficulty: Optional[str] = None) -> List[WorkoutTemplate]:
    templates = WORKOUT_TEMPLATES
    if category:
        templates = [t for t in templates if t.category == category]
    if difficulty:
        templates = [t for t in templates if t.difficulty.value == difficulty]
    return templates


def filter_meals(category: Optional[str] = None) -> List[Meal]:
    if not category:
        return list(MEALS)
    return [meal for meal in MEALS if meal.category.value == category]
