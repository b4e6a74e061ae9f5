"""Default corpus: Malay sentence, then its English translation."""

CORPUS = """\
Selamat pagi.
Good morning.
Apa khabar?
How are you?
Khabar baik, terima kasih.
I am fine, thank you.
Siapa nama awak?
What is your name?
Nama saya Aminah.
My name is Aminah.
Tulis nama awak.
Write your name.
Saya berasal dari Malaysia.
I come from Malaysia.
Saya tinggal di Kuala Lumpur.
I live in Kuala Lumpur.
Di mana tandas?
Where is the toilet?
Berapa harga ini?
How much is this?
Mahal sangat!
Very expensive!
Boleh kurang sedikit?
Can you lower the price a little?
Saya mahu secawan kopi.
I want a cup of coffee.
Tolong beri saya air kosong.
Please give me plain water.
Saya tidak faham.
I do not understand.
Boleh cakap perlahan sedikit?
Can you speak a little slower?
Saya sedang belajar bahasa Melayu.
I am learning Malay.
Hari ini panas.
It is hot today.
Esok mungkin hujan.
It might rain tomorrow.
Pukul berapa sekarang?
What time is it now?
Sekarang pukul tiga petang.
It is three in the afternoon now.
Kedai itu buka setiap hari.
That shop opens every day.
Saya lapar, mari kita makan.
I am hungry, let us eat.
Nasi lemak ini sedap.
This nasi lemak is delicious.
Saya suka makan durian.
I like to eat durian.
Jangan lupa bawa payung.
Do not forget to bring an umbrella.
Bas ke Melaka bertolak pukul 8 pagi.
The bus to Melaka leaves at 8 in the morning.
Stesen kereta api di sebelah kanan.
The train station is on the right.
Belok kiri di simpang itu.
Turn left at that junction.
Rumah saya tidak jauh dari sini.
My house is not far from here.
Adik saya berumur 12 tahun.
My younger sibling is 12 years old.
Ibu sedang memasak di dapur.
Mother is cooking in the kitchen.
Ayah pergi ke pejabat.
Father went to the office.
Kami bercuti di Langkawi.
We are on holiday in Langkawi.
Buku itu di atas meja.
The book is on the table.
Tolong tutup pintu.
Please close the door.
Jumpa lagi!
See you again!
Selamat malam.
Good night.
Saya minta maaf.
I am sorry.
Sama-sama.
You are welcome.
"""
