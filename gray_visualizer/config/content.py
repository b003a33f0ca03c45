"""
Static educational content for the Algorithm and Applications tabs.

Kept out of the widgets so panels only handle layout.
"""

ALGORITHM_TITLE = "Algorithm"

ALGORITHM_METHODS = [
    {
        'title': "Method 1: Binary to Gray Conversion",
        'code': (
            "def binary_to_gray(n):\n"
            "    return n ^ (n >> 1)\n"
            "\n"
            "# Generate n-bit Gray code\n"
            "def generate_gray_code(bits):\n"
            "    for i in range(2**bits):\n"
            "        gray = binary_to_gray(i)\n"
            "        yield format(gray, f'0{bits}b')"
        ),
    },
    {
        'title': "Method 2: Recursive Reflection",
        'code': (
            "def gray_code_recursive(n):\n"
            "    if n == 1:\n"
            "        return ['0', '1']\n"
            "\n"
            "    prev = gray_code_recursive(n - 1)\n"
            "    # Reflect and prefix\n"
            "    result = ['0' + code for code in prev]\n"
            "    result += ['1' + code for code in reversed(prev)]\n"
            "    return result"
        ),
    },
]

KEY_PROPERTY_TITLE = "Key Property"
KEY_PROPERTY_TEXT = (
    "The XOR operation (n ^ (n >> 1)) converts binary to Gray code by XORing each bit "
    "with the bit to its left. This ensures adjacent values differ by only one bit."
)

APPLICATIONS_TITLE = "Real-World Applications"

# accent: skin key prefix used for the card colours
APPLICATIONS = [
    {
        'title': "🔄 Rotary Encoders",
        'accent': 'card_blue',
        'text': (
            "Mechanical position sensors use Gray code to prevent misreading during transitions. "
            "Since only one bit changes at a time, momentary misalignment causes at most one bit error."
        ),
    },
    {
        'title': "📊 Karnaugh Maps",
        'accent': 'card_green',
        'text': (
            "K-maps use Gray code ordering to group adjacent cells, making it easier to identify "
            "and minimize Boolean expressions in digital logic design."
        ),
    },
    {
        'title': "🎮 Tower of Hanoi",
        'accent': 'card_purple',
        'text': (
            "The solution sequence for Tower of Hanoi follows Gray code. Each move corresponds "
            "to flipping one bit, making it optimal for solving the puzzle."
        ),
    },
    {
        'title': "🔢 Error Correction",
        'accent': 'card_orange',
        'text': (
            "Analog-to-digital converters use Gray code to minimize errors. If a reading occurs "
            "during a transition, the error is limited to one quantization level."
        ),
    },
]

WHY_IT_MATTERS_TITLE = "💡 Why It Matters"
WHY_IT_MATTERS_INTRO = "Gray code's single-bit-change property makes it invaluable in systems where:"
WHY_IT_MATTERS_POINTS = [
    "Minimizing transition errors is critical",
    "Hardware simplicity is desired",
    "Sequential state changes must be reliable",
    "Combinatorial generation needs efficiency",
]

FOOTER_LINES = [
    "Visualization of Binary Reflected Gray Code algorithm",
]
