"""
Static catalog data for AngloLingua.

Five English lessons for Polish speakers, progressing from A1 to A2.
The first FREE_LESSON_COUNT lessons (by order) are free; the rest are
PREMIUM. Also holds the paywall copy and the AI tutor's fixed texts.

This module is the content contract for the entire app:
- The catalog collaborator serves MOCK_LESSONS (with simulated latency)
- The AI tutor returns MOCK_TUTOR_REPLIES in mock mode
- Frontend renders these structures in the UI
"""

# ---------------------------------------------------------------------------
# AI tutor texts
# ---------------------------------------------------------------------------

AI_SYSTEM_PROMPT = (
    "You are a friendly and patient English tutor for Polish speakers. "
    "Help them practice English conversation. Keep your responses concise and "
    "encouraging. You can gently correct their mistakes. If the user asks for "
    "something unrelated to language learning, politely steer them back to "
    "practicing English. Respond in English unless specifically asked for a "
    "Polish translation of a word or short phrase."
)

GREETING_MESSAGE = (
    "Hello! I'm your AI English tutor. How can I help you practice today? "
    "(Witaj! Jestem Twoim korepetytorem AI. Jak mogę Ci dzisiaj pomóc w ćwiczeniach?)"
)

AI_ERROR_MESSAGE = (
    "Sorry, I encountered an error. Please try again. "
    "(Przepraszam, wystąpił błąd. Spróbuj ponownie.)"
)

SERVICE_UNAVAILABLE_MESSAGE = "AI service is unavailable. API key might be missing."

# Scripted tutor replies used in mock mode, cycled by turn.
MOCK_TUTOR_REPLIES = [
    "Nice to meet you! Let's practice. Can you tell me a little about yourself?",
    "Great! Small tip: we say \"I am twenty years old\", not \"I have twenty years\". "
    "What do you like to do in your free time?",
    "That sounds fun! How often do you do that? Try to use \"every day\" or \"on weekends\".",
    "Very good! Your sentence was correct. What did you do last weekend?",
    "Excellent! Remember the past tense: \"I went\", \"I saw\", \"I ate\". "
    "Would you like to practice ordering food in a restaurant?",
]

# ---------------------------------------------------------------------------
# Paywall
# ---------------------------------------------------------------------------

PREMIUM_FEATURES = [
    "Access to all lessons and levels",
    "Unlimited AI conversations",
    "Detailed quizzes and progress analytics",
    "Personalized feedback on exercises",
    "Downloadable completion certificates",
    "Offline access to lesson materials (coming soon!)",
]

# Defaults applied to every newly logged-in user.
DEFAULT_USER = {
    "current_level": "A1",
    "completed_lesson_ids": [],
    "subscription_tier": "FREE",
}

# ---------------------------------------------------------------------------
# Lessons
# ---------------------------------------------------------------------------
# Each lesson contains:
#   - id / title / level / order / estimated_time_minutes / tags
#   - content: introduction, vocabulary, grammar, optional dialogue, summary
#   - homework: MULTIPLE_CHOICE (correct_answer = option id) or
#     FILL_IN_THE_BLANKS (correct_answer = single or multi_blank variant)

MOCK_LESSONS = [
    {
        "id": "lesson-1",
        "title": "Greetings and Introductions (Pozdrowienia i przedstawianie się)",
        "level": "A1",
        "order": 1,
        "estimated_time_minutes": 20,
        "tags": ["basics", "conversation"],
        "content": {
            "introduction": (
                "Welcome to your first English lesson! Today, we will learn basic greetings "
                "and how to introduce yourself and others. Witamy na pierwszej lekcji "
                "angielskiego! Dziś nauczymy się podstawowych zwrotów grzecznościowych "
                "oraz jak przedstawiać siebie i innych."
            ),
            "vocabulary": [
                {"polish": "Cześć", "english": "Hello / Hi", "example_sentence": "Hello, how are you?"},
                {"polish": "Dzień dobry (rano)", "english": "Good morning", "example_sentence": "Good morning, teacher!"},
                {"polish": "Dzień dobry (po południu)", "english": "Good afternoon"},
                {"polish": "Dobry wieczór", "english": "Good evening"},
                {"polish": "Do widzenia", "english": "Goodbye / Bye", "example_sentence": "Bye! See you tomorrow."},
                {"polish": "Nazywam się...", "english": "My name is...", "example_sentence": "My name is Anna."},
                {"polish": "Jak się masz?", "english": "How are you?", "example_sentence": "Hi John, how are you?"},
                {"polish": "Dziękuję", "english": "Thank you", "example_sentence": "Thank you for your help."},
                {"polish": "Proszę (prosząc o coś)", "english": "Please", "example_sentence": "Can I have some water, please?"},
                {"polish": "Przepraszam", "english": "Excuse me / Sorry"},
            ],
            "grammar": [
                {
                    "title": 'The verb "to be" (am, is, are) - Czasownik "być"',
                    "explanation": (
                        'We use "to be" to talk about names, feelings, and states. '
                        'Używamy "to be" do mówienia o imionach, uczuciach i stanach.'
                    ),
                    "examples": ["I am happy.", "You are a student.", "She is Polish.", "My name is Piotr."],
                },
            ],
            "dialogue": {
                "title": "At a Cafe (W kawiarni)",
                "participants": ["Anna", "Barista"],
                "lines": [
                    {"speaker": "Anna", "line": "Hello!"},
                    {"speaker": "Barista", "line": "Good morning! How can I help you?"},
                    {"speaker": "Anna", "line": "Can I have a coffee, please?"},
                    {"speaker": "Barista", "line": "Sure. Anything else?"},
                    {"speaker": "Anna", "line": "No, thank you."},
                ],
            },
            "summary": (
                "Great job! You've learned essential greetings and introductions. Practice "
                "them with friends! Świetna robota! Nauczyłeś/aś się podstawowych zwrotów "
                "grzecznościowych. Ćwicz je ze znajomymi!"
            ),
        },
        "homework": [
            {
                "id": "hw1-1",
                "type": "MULTIPLE_CHOICE",
                "question": 'How do you say "Dzień dobry (rano)" in English?',
                "options": [
                    {"id": "opt1", "text": "Good evening"},
                    {"id": "opt2", "text": "Good morning"},
                    {"id": "opt3", "text": "Good afternoon"},
                ],
                "correct_answer": "opt2",
                "explanation": '"Good morning" is used to greet someone in the morning.',
            },
            {
                "id": "hw1-2",
                "type": "FILL_IN_THE_BLANKS",
                "question": "My name ___ Maria.",
                "correct_answer": {"kind": "single", "text": "is"},
                "explanation": 'With "My name", we use "is".',
            },
        ],
    },
    {
        "id": "lesson-2",
        "title": "Numbers and Colors (Liczby i kolory)",
        "level": "A1",
        "order": 2,
        "estimated_time_minutes": 25,
        "tags": ["basics", "vocabulary"],
        "content": {
            "introduction": (
                "This lesson covers numbers 1-20 and basic colors. "
                "Ta lekcja obejmuje liczby 1-20 oraz podstawowe kolory."
            ),
            "vocabulary": [
                {"polish": "Jeden", "english": "One"},
                {"polish": "Dwa", "english": "Two"},
                {"polish": "Trzy", "english": "Three"},
                {"polish": "Czerwony", "english": "Red"},
                {"polish": "Niebieski", "english": "Blue"},
                {"polish": "Zielony", "english": "Green"},
                {"polish": "Żółty", "english": "Yellow"},
                {"polish": "Czarny", "english": "Black"},
                {"polish": "Biały", "english": "White"},
            ],
            "grammar": [
                {
                    "title": "Plural Nouns (Liczba mnoga rzeczowników)",
                    "explanation": (
                        "To make most nouns plural, add -s. "
                        "Aby utworzyć liczbę mnogą większości rzeczowników, dodaj -s."
                    ),
                    "examples": ["One cat, two cats.", "One book, three books."],
                },
            ],
            "summary": "Now you can count and name colors! Teraz potrafisz liczyć i nazywać kolory!",
        },
        "homework": [
            {
                "id": "hw2-1",
                "type": "MULTIPLE_CHOICE",
                "question": 'What color is "niebieski"?',
                "options": [
                    {"id": "opt1", "text": "Red"},
                    {"id": "opt2", "text": "Blue"},
                    {"id": "opt3", "text": "Green"},
                ],
                "correct_answer": "opt2",
            },
            {
                "id": "hw2-2",
                "type": "FILL_IN_THE_BLANKS",
                "question": "I have two ____ (książka).",
                "correct_answer": {"kind": "single", "text": "books"},
                "explanation": 'The plural of "book" is "books".',
            },
        ],
    },
    {
        "id": "lesson-3",
        "title": "Talking About Family (Rozmowa o rodzinie) - PREMIUM",
        "level": "A2",
        "order": 3,
        "estimated_time_minutes": 30,
        "tags": ["family", "conversation", "premium"],
        "content": {
            "introduction": (
                "Learn vocabulary related to family members and how to describe your family. "
                "Naucz się słownictwa związanego z członkami rodziny i jak opisywać swoją rodzinę."
            ),
            "vocabulary": [
                {"polish": "Matka", "english": "Mother"},
                {"polish": "Ojciec", "english": "Father"},
                {"polish": "Brat", "english": "Brother"},
                {"polish": "Siostra", "english": "Sister"},
                {"polish": "Syn", "english": "Son"},
                {"polish": "Córka", "english": "Daughter"},
            ],
            "grammar": [
                {
                    "title": "Possessive Adjectives (Przymiotniki dzierżawcze)",
                    "explanation": (
                        "Use my, your, his, her, its, our, their to show possession. "
                        "Użyj my, your, his, her, its, our, their, aby pokazać przynależność."
                    ),
                    "examples": ["My mother is a doctor.", "His brother is tall."],
                },
            ],
            "summary": "You can now talk about your family! Możesz teraz rozmawiać o swojej rodzinie!",
        },
        "homework": [
            {
                "id": "hw3-1",
                "type": "FILL_IN_THE_BLANKS",
                "question": "This is ___ (mój) sister.",
                "correct_answer": {"kind": "single", "text": "my"},
            },
        ],
    },
    {
        "id": "lesson-4",
        "title": "Ordering Food (Zamawianie jedzenia) - PREMIUM",
        "level": "A2",
        "order": 4,
        "estimated_time_minutes": 35,
        "tags": ["food", "travel", "premium"],
        "content": {
            "introduction": (
                "Learn how to order food in a restaurant. "
                "Naucz się, jak zamawiać jedzenie w restauracji."
            ),
            "vocabulary": [
                {"polish": "Chciałbym/Chciałabym...", "english": "I would like..."},
                {"polish": "Poproszę...", "english": "Can I have... / I'll take..."},
                {"polish": "Rachunek", "english": "Bill / Check"},
                {"polish": "Smacznego", "english": "Enjoy your meal / Bon appétit"},
            ],
            "grammar": [
                {
                    "title": (
                        'Using "Can I...?" and "Could I...?" for requests '
                        '(Używanie "Can I...?" i "Could I...?" do próśb)'
                    ),
                    "explanation": (
                        '"Could I...?" is generally more polite than "Can I...?". '
                        '"Could I...?" jest ogólnie bardziej uprzejme niż "Can I...?".'
                    ),
                    "examples": ["Can I have the menu, please?", "Could I have some water?"],
                },
            ],
            "summary": (
                "You are ready to order your favorite meal in English! "
                "Jesteś gotowy/a zamówić swoje ulubione danie po angielsku!"
            ),
        },
        "homework": [
            {
                "id": "hw4-1",
                "type": "MULTIPLE_CHOICE",
                "question": "What is a polite way to ask for the bill?",
                "options": [
                    {"id": "opt1", "text": "Give me the bill!"},
                    {"id": "opt2", "text": "Could I have the bill, please?"},
                    {"id": "opt3", "text": "Where is the bill?"},
                ],
                "correct_answer": "opt2",
            },
        ],
    },
    {
        "id": "lesson-5",
        "title": "Daily Routines (Codzienne czynności) - PREMIUM",
        "level": "A2",
        "order": 5,
        "estimated_time_minutes": 30,
        "tags": ["daily life", "verbs", "premium"],
        "content": {
            "introduction": (
                "Talk about your daily activities using Present Simple tense. Opowiadaj o "
                "swoich codziennych czynnościach używając czasu Present Simple."
            ),
            "vocabulary": [
                {"polish": "Wstawać", "english": "Wake up / Get up"},
                {"polish": "Jeść śniadanie", "english": "Eat breakfast"},
                {"polish": "Iść do pracy/szkoły", "english": "Go to work/school"},
                {"polish": "Oglądać telewizję", "english": "Watch TV"},
                {"polish": "Iść spać", "english": "Go to bed"},
            ],
            "grammar": [
                {
                    "title": "Present Simple Tense (Czas teraźniejszy prosty)",
                    "explanation": (
                        "Used for habits, routines, and general truths. Używany do opisywania "
                        "nawyków, rutynowych czynności i ogólnych prawd."
                    ),
                    "examples": ["I wake up at 7 AM.", "She works in an office.", "They play football on Saturdays."],
                },
            ],
            "summary": (
                "You can now describe your typical day in English. "
                "Możesz teraz opisać swój typowy dzień po angielsku."
            ),
        },
        "homework": [
            {
                "id": "hw5-1",
                "type": "FILL_IN_THE_BLANKS",
                "question": "He ____ (oglądać) TV in the evening.",
                "correct_answer": {"kind": "single", "text": "watches"},
                "explanation": "For he/she/it in Present Simple, add -s or -es to the verb.",
            },
            {
                "id": "hw5-2",
                "type": "FILL_IN_THE_BLANKS",
                "question": "She ___ (wstawać) up at 7 and ___ (jeść) breakfast at 8.",
                "correct_answer": {"kind": "multi_blank", "texts": ["wakes", "eats"]},
                "explanation": "Both verbs take -s after she.",
            },
        ],
    },
]
