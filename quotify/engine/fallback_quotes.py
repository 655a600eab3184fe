"""Static quotes served when the quote API cannot be reached.

Page N of a batch falls back to ``FALLBACK_QUOTES[N * page_size:(N + 1) * page_size]``,
so the table must hold at least one full batch.
"""

from __future__ import annotations

from typing import List, Tuple

from quotify.engine.quote import Quote

_RAW: List[Tuple[str, str]] = [
    ("The greatest glory in living lies not in never falling, but in rising every time we fall.", "Nelson Mandela"),
    ("The way to get started is to quit talking and begin doing.", "Walt Disney"),
    ("Your time is limited, so don't waste it living someone else's life.", "Steve Jobs"),
    ("If life were predictable it would cease to be life, and be without flavor.", "Eleanor Roosevelt"),
    ("If you look at what you have in life, you'll always have more.", "Oprah Winfrey"),
    ("Life is what happens when you're busy making other plans.", "John Lennon"),
    ("Spread love everywhere you go. Let no one ever come to you without leaving happier.", "Mother Teresa"),
    ("When you reach the end of your rope, tie a knot in it and hang on.", "Franklin D. Roosevelt"),
    ("Always remember that you are absolutely unique. Just like everyone else.", "Margaret Mead"),
    ("Don't judge each day by the harvest you reap but by the seeds that you plant.", "Robert Louis Stevenson"),
    ("The future belongs to those who believe in the beauty of their dreams.", "Eleanor Roosevelt"),
    ("Tell me and I forget. Teach me and I remember. Involve me and I learn.", "Benjamin Franklin"),
    ("The best and most beautiful things in the world cannot be seen or even touched, they must be felt with the heart.", "Helen Keller"),
    ("It is during our darkest moments that we must focus to see the light.", "Aristotle"),
    ("Whoever is happy will make others happy too.", "Anne Frank"),
    ("Do not go where the path may lead, go instead where there is no path and leave a trail.", "Ralph Waldo Emerson"),
    ("You will face many defeats in life, but never let yourself be defeated.", "Maya Angelou"),
    ("In the end, it's not the years in your life that count. It's the life in your years.", "Abraham Lincoln"),
    ("Never let the fear of striking out keep you from playing the game.", "Babe Ruth"),
    ("Life is either a daring adventure or nothing at all.", "Helen Keller"),
    ("Many of life's failures are people who did not realize how close they were to success when they gave up.", "Thomas A. Edison"),
    ("You have brains in your head. You have feet in your shoes. You can steer yourself any direction you choose.", "Dr. Seuss"),
    ("Success is not final, failure is not fatal: it is the courage to continue that counts.", "Winston Churchill"),
    ("It does not matter how slowly you go as long as you do not stop.", "Confucius"),
    ("Everything you've ever wanted is on the other side of fear.", "George Addair"),
    ("Believe you can and you're halfway there.", "Theodore Roosevelt"),
    ("Act as if what you do makes a difference. It does.", "William James"),
    ("What lies behind us and what lies before us are tiny matters compared to what lies within us.", "Ralph Waldo Emerson"),
    ("The only way to do great work is to love what you do.", "Steve Jobs"),
    ("I have not failed. I've just found 10,000 ways that won't work.", "Thomas A. Edison"),
    ("A person who never made a mistake never tried anything new.", "Albert Einstein"),
    ("The mind is everything. What you think you become.", "Buddha"),
    ("Strive not to be a success, but rather to be of value.", "Albert Einstein"),
    ("Two roads diverged in a wood, and I took the one less traveled by, and that has made all the difference.", "Robert Frost"),
    ("I attribute my success to this: I never gave or took any excuse.", "Florence Nightingale"),
    ("The most difficult thing is the decision to act, the rest is merely tenacity.", "Amelia Earhart"),
    ("Every strike brings me closer to the next home run.", "Babe Ruth"),
    ("Definiteness of purpose is the starting point of all achievement.", "W. Clement Stone"),
    ("We become what we think about.", "Earl Nightingale"),
    ("Life is 10% what happens to me and 90% of how I react to it.", "Charles Swindoll"),
    ("The best time to plant a tree was 20 years ago. The second best time is now.", "Chinese Proverb"),
    ("An unexamined life is not worth living.", "Socrates"),
    ("Eighty percent of success is showing up.", "Woody Allen"),
    ("Winning isn't everything, but wanting to win is.", "Vince Lombardi"),
    ("You miss 100% of the shots you don't take.", "Wayne Gretzky"),
    ("Whether you think you can or you think you can't, you're right.", "Henry Ford"),
    ("The two most important days in your life are the day you are born and the day you find out why.", "Mark Twain"),
    ("Whatever you can do, or dream you can, begin it. Boldness has genius, power and magic in it.", "Johann Wolfgang von Goethe"),
    ("The best revenge is massive success.", "Frank Sinatra"),
    ("People often say that motivation doesn't last. Well, neither does bathing. That's why we recommend it daily.", "Zig Ziglar"),
    ("Life shrinks or expands in proportion to one's courage.", "Anais Nin"),
    ("There is only one way to avoid criticism: do nothing, say nothing, and be nothing.", "Aristotle"),
    ("Ask and it will be given to you; search, and you will find; knock and the door will be opened for you.", "Jesus"),
    ("Go confidently in the direction of your dreams. Live the life you have imagined.", "Henry David Thoreau"),
    ("Change your thoughts and you change your world.", "Norman Vincent Peale"),
    ("It always seems impossible until it's done.", "Nelson Mandela"),
    ("Happiness is not something readymade. It comes from your own actions.", "Dalai Lama"),
    ("Dream big and dare to fail.", "Norman Vaughan"),
    ("Education is the most powerful weapon which you can use to change the world.", "Nelson Mandela"),
    ("Keep your face always toward the sunshine, and shadows will fall behind you.", "Walt Whitman"),
]

FALLBACK_QUOTES: Tuple[Quote, ...] = tuple(Quote(text=text, author=author) for text, author in _RAW)
