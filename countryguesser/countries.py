"""The built-in table of countries and their attributes."""

from __future__ import annotations

from .dictionary import Dictionary

# How many keys the random draw picks from, in key order.
COUNTRIES_COUNT = 191

_COUNTRIES: tuple[tuple[str, str, str, str, str, str, str], ...] = (
    ("Afghanistan", "Asie", "Dari, Pashto", "38000000", "Afghani", "6", "Noir, Rouge, Vert"),
    ("Albanie", "Europe", "Albanais", "2800000", "Lek", "4", "Rouge, Noir"),
    ("Algerie", "Afrique", "Arabe", "43000000", "Dinar algerien", "6", "Vert, Blanc, Rouge"),
    ("Andorre", "Europe", "Catalan", "77000", "Euro", "2", "Bleu, Jaune, Rouge"),
    ("Angola", "Afrique", "Portugais", "31000000", "Kwanza", "4", "Rouge, Noir"),
    ("Antigua-et-Barbuda", "Amerique", "Anglais", "97000", "Dollar des Caraibes orientales", "0", "Rouge, Noir, Bleu, Blanc"),
    ("Argentine", "Amerique", "Espagnol", "45000000", "Peso argentin", "5", "Bleu, Blanc"),
    ("Armenie", "Asie", "Armenien", "3000000", "Dram", "4", "Rouge, Bleu, Orange"),
    ("Australie", "Oceanie", "Anglais", "25000000", "Dollar australien", "0", "Bleu, Blanc, Rouge"),
    ("Autriche", "Europe", "Allemand", "9000000", "Euro", "8", "Rouge, Blanc"),
    ("Azerbaidjan", "Asie", "Azeri", "10000000", "Manat", "5", "Bleu, Rouge, Vert"),
    ("Bahamas", "Amerique", "Anglais", "389000", "Dollar bahameen", "0", "Bleu, Jaune, Noir"),
    ("Bahrein", "Asie", "Arabe", "1700000", "Dinar bahreini", "1", "Rouge, Blanc"),
    ("Bangladesh", "Asie", "Bengali", "164000000", "Taka", "2", "Vert, Rouge"),
    ("Barbade", "Amerique", "Anglais", "287000", "Dollar barbadien", "0", "Bleu, Jaune, Noir"),
    ("Belgique", "Europe", "Neerlandais, Français, Allemand", "11500000", "Euro", "4", "Noir, Jaune, Rouge"),
    ("Belize", "Amerique", "Anglais", "397000", "Dollar belizeen", "2", "Bleu, Rouge, Blanc"),
    ("Benin", "Afrique", "Français", "12000000", "Franc CFA", "4", "Vert, Rouge, Jaune"),
    ("Bhoutan", "Asie", "Dzongkha", "763000", "Ngultrum", "2", "Orange, Blanc"),
    ("Bolivie", "Amerique", "Espagnol, Quechua, Aymara", "11500000", "Boliviano", "5", "Rouge, Jaune, Vert"),
    ("Bosnie-Herzegovine", "Europe", "Bosniaque, Croate, Serbe", "3300000", "Mark convertible", "5", "Bleu, Jaune"),
    ("Botswana", "Afrique", "Anglais, Tswana", "2300000", "Pula", "4", "Bleu, Noir, Blanc"),
    ("Bresil", "Amerique", "Portugais", "212000000", "Real", "10", "Vert, Jaune, Bleu"),
    ("Brunei", "Asie", "Malais", "437000", "Dollar bruneien", "2", "Jaune, Blanc, Noir"),
    ("Bulgarie", "Europe", "Bulgare", "7000000", "Lev", "5", "Blanc, Vert, Rouge"),
    ("Burkina Faso", "Afrique", "Français", "20000000", "Franc CFA", "6", "Rouge, Vert"),
    ("Burundi", "Afrique", "Kirundi, Français", "11000000", "Franc burundais", "3", "Rouge, Vert, Blanc"),
    ("Cambodge", "Asie", "Khmer", "16000000", "Riel", "3", "Bleu, Rouge"),
    ("Cameroun", "Afrique", "Français, Anglais", "25000000", "Franc CFA", "6", "Vert, Rouge, Jaune"),
    ("Canada", "Amerique", "Anglais, Français", "38000000", "Dollar canadien", "1", "Rouge, Blanc"),
    ("Cap-Vert", "Afrique", "Portugais", "555000", "Escudo cap-verdien", "0", "Bleu, Blanc, Rouge, Jaune"),
    ("Republique_centrafricaine", "Afrique", "Sango, Français", "4700000", "Franc CFA", "6", "Bleu, Blanc, Rouge, Vert, Jaune"),
    ("Tchad", "Afrique", "Français, Arabe", "16000000", "Franc CFA", "6", "Bleu, Jaune, Rouge"),
    ("Chili", "Amerique", "Espagnol", "19000000", "Peso chilien", "3", "Rouge, Blanc, Bleu"),
    ("Chine", "Asie", "Mandarin", "1398000000", "Yuan", "14", "Rouge, Jaune"),
    ("Colombie", "Amerique", "Espagnol", "50000000", "Peso colombien", "5", "Jaune, Bleu, Rouge"),
    ("Comores", "Afrique", "Comorien, Arabe, Français", "869000", "Franc comorien", "0", "Vert, Jaune, Blanc, Rouge, Bleu"),
    ("Republique_du_Congo", "Afrique", "Français", "5200000", "Franc CFA", "5", "Vert, Jaune, Rouge"),
    ("Republique_democratique_du_Congo", "Afrique", "Français", "89000000", "Franc congolais", "9", "Bleu, Rouge, Jaune"),
    ("Costa_Rica", "Amerique", "Espagnol", "5000000", "Colón costaricain", "2", "Bleu, Blanc, Rouge"),
    ("Croatie", "Europe", "Croate", "4000000", "Kuna", "5", "Rouge, Blanc, Bleu"),
    ("Cuba", "Amerique", "Espagnol", "11000000", "Peso cubain", "0", "Rouge, Blanc, Bleu"),
    ("Chypre", "Europe", "Grec, Turc", "1200000", "Euro", "1", "Blanc, Orange, Vert"),
    ("Republique Tcheque", "Europe", "Tcheque", "10700000", "Couronne tcheque", "4", "Rouge, Blanc, Bleu"),
    ("Danemark", "Europe", "Danois", "5800000", "Couronne danoise", "1", "Rouge, Blanc"),
    ("Djibouti", "Afrique", "Français, Arabe", "1000000", "Franc djiboutien", "3", "Vert, Blanc, Bleu, Rouge"),
    ("Dominique", "Amerique", "Anglais", "72,000", "Dollar des Caraibes orientales", "0", "Vert, Jaune, Rouge, Noir"),
    ("Republique dominicaine", "Amerique", "Espagnol", "10800000", "Peso dominicain", "1", "Rouge, Blanc, Bleu"),
    ("Equateur", "Amerique", "Espagnol", "17000000", "Dollar americain", "2", "Jaune, Bleu, Rouge"),
    ("Egypte", "Afrique", "Arabe", "100000000", "Livre egyptienne", "4", "Rouge, Blanc, Noir"),
    ("El_Salvador", "Amerique", "Espagnol", "6500000", "Dollar americain", "2", "Bleu, Blanc"),
    ("Guinee_equatoriale", "Afrique", "Espagnol, Français, Portugais", "1400000", "Franc CFA", "3", "Vert, Blanc, Rouge, Bleu"),
    ("Erythree", "Afrique", "Tigrigna, Arabe, Anglais", "3500000", "Nakfa", "3", "Vert, Bleu, Rouge"),
    ("Estonie", "Europe", "Estonien", "1300000", "Euro", "2", "Bleu, Noir, Blanc"),
    ("Eswatini", "Afrique", "Swati, Anglais", "1100000", "Lilangeni", "2", "Bleu, Jaune, Rouge, Blanc"),
    ("ethiopie", "Afrique", "Amharique", "112000000", "Birr", "6", "Vert, Jaune, Rouge"),
    ("Fidji", "Oceanie", "Anglais, Fidjien, Hindoustani", "896000", "Dollar fidjien", "0", "Bleu, Blanc, Rouge"),
    ("Finlande", "Europe", "Finnois, Suedois", "5500000", "Euro", "3", "Bleu, Blanc"),
    ("France", "Europe", "Français", "67000000", "Euro", "8", "Bleu, Blanc, Rouge"),
    ("Gabon", "Afrique", "Français", "2100000", "Franc CFA", "3", "Vert, Jaune, Bleu"),
    ("Gambie", "Afrique", "Anglais", "2400000", "Dalasi", "2", "Rouge, Bleu, Vert, Blanc"),
    ("Georgie", "Asie", "Georgien", "3700000", "Lari", "4", "Rouge, Blanc"),
    ("Allemagne", "Europe", "Allemand", "83000000", "Euro", "9", "Noir, Rouge, Jaune"),
    ("Ghana", "Afrique", "Anglais", "31000000", "Cedi", "3", "Rouge, Jaune, Vert, Noir"),
    ("Grece", "Europe", "Grec", "10400000", "Euro", "4", "Bleu, Blanc"),
    ("Grenade", "Amerique", "Anglais", "113000", "Dollar des Caraibes orientales", "0", "Rouge, Jaune, Vert"),
    ("Guatemala", "Amerique", "Espagnol", "17000000", "Quetzal", "4", "Bleu, Blanc"),
    ("Guinee", "Afrique", "Français", "13000000", "Franc guineen", "6", "Rouge, Jaune, Vert"),
    ("Guinee-Bissau", "Afrique", "Portugais", "2000000", "Franc CFA", "5", "Rouge, Jaune, Vert"),
    ("Guyana", "Amerique", "Anglais", "786000", "Dollar guyanien", "2", "Vert, Jaune, Rouge, Noir, Blanc"),
    ("Haiti", "Amerique", "Creole haitien, Français", "11000000", "Gourde", "1", "Bleu, Rouge"),
    ("Honduras", "Amerique", "Espagnol", "9500000", "Lempira", "3", "Bleu, Blanc"),
    ("Hongrie", "Europe", "Hongrois", "9600000", "Forint", "7", "Rouge, Blanc, Vert"),
    ("Islande", "Europe", "Islandais", "364000", "Couronne islandaise", "0", "Bleu, Blanc, Rouge"),
    ("Inde", "Asie", "Hindi, Anglais", "1366000000", "Roupie", "6", "Orange, Blanc, Vert"),
    ("Indonesie", "Asie", "Indonesien", "270000000", "Roupie indonesienne", "3", "Rouge, Blanc"),
    ("Iran", "Asie", "Persan", "83000000", "Rial iranien", "7", "Vert, Blanc, Rouge"),
    ("Irak", "Asie", "Arabe, Kurde", "40000000", "Dinar irakien", "6", "Rouge, Blanc, Noir, Vert"),
    ("Irlande", "Europe", "Irlandais, Anglais", "4900000", "Euro", "1", "Vert, Blanc, Orange"),
    ("Israël", "Asie", "Hebreu, Arabe", "9000000", "Shekel", "5", "Bleu, Blanc"),
    ("Italie", "Europe", "Italien", "60000000", "Euro", "6", "Vert, Blanc, Rouge"),
    ("Jamaique", "Amerique", "Anglais", "2900000", "Dollar jamaicain", "0", "Noir, Vert, Jaune"),
    ("Japon", "Asie", "Japonais", "126000000", "Yen", "0", "Rouge, Blanc"),
    ("Jordanie", "Asie", "Arabe", "10000000", "Dinar jordanien", "5", "Rouge, Blanc, Noir, Vert"),
    ("Kazakhstan", "Asie", "Kazakh, Russe", "18700000", "Tenge", "5", "Bleu, Jaune"),
    ("Kenya", "Afrique", "Swahili, Anglais", "53000000", "Shilling kenyan", "5", "Noir, Rouge, Vert"),
    ("Kiribati", "Oceanie", "Anglais, Gilbertin", "119000", "Dollar australien", "0", "Bleu, Rouge, Blanc, Jaune"),
    ("Coree_du_Nord", "Asie", "Coreen", "25000000", "Won nord-coreen", "3", "Rouge, Bleu, Blanc"),
    ("Coree_du_Sud", "Asie", "Coreen", "51000000", "Won sud-coreen", "1", "Blanc, Rouge, Bleu, Noir"),
    ("Koweit", "Asie", "Arabe", "4200000", "Dinar koweitien", "2", "Vert, Blanc, Rouge, Noir"),
    ("Kirghizistan", "Asie", "Kirghize, Russe", "6500000", "Som", "4", "Rouge, Jaune"),
    ("Laos", "Asie", "Lao", "7300000", "Kip", "5", "Rouge, Bleu, Blanc"),
    ("Lettonie", "Europe", "Letton", "1900000", "Euro", "4", "Rouge, Blanc"),
    ("Liban", "Asie", "Arabe", "6800000", "Livre libanaise", "2", "Rouge, Blanc, Vert"),
    ("Lesotho", "Afrique", "Anglais, Sesotho", "2100000", "Loti", "2", "Bleu, Blanc, Vert"),
    ("Liberia", "Afrique", "Anglais", "5000000", "Dollar liberien", "3", "Rouge, Blanc, Bleu"),
    ("Libye", "Afrique", "Arabe", "6800000", "Dinar libyen", "6", "Rouge, Noir, Vert"),
    ("Liechtenstein", "Europe", "Allemand", "38000", "Franc suisse", "2", "Bleu, Rouge"),
    ("Lituanie", "Europe", "Lituanien", "2800000", "Euro", "4", "Jaune, Vert, Rouge"),
    ("Luxembourg", "Europe", "Luxembourgeois, Français, Allemand", "634000", "Euro", "3", "Rouge, Blanc, Bleu"),
    ("Madagascar", "Afrique", "Malagasy, Français", "27000000", "Ariary", "4", "Rouge, Vert, Blanc"),
    ("Malawi", "Afrique", "Anglais, Chichewa", "19000000", "Kwacha", "3", "Noir, Rouge, Vert"),
    ("Malaisie", "Asie", "Malais", "32000000", "Ringgit", "3", "Jaune, Bleu, Rouge, Blanc"),
    ("Maldives", "Asie", "Dhivehi", "540000", "Rufiyaa", "0", "Rouge, Vert, Blanc"),
    ("Mali", "Afrique", "Français", "19000000", "Franc CFA", "7", "Vert, Jaune, Rouge"),
    ("Malte", "Europe", "Maltais, Anglais", "514000", "Euro", "0", "Rouge, Blanc"),
    ("Iles_Marshall", "Oceanie", "Anglais, Marshallais", "59,000", "Dollar americain", "0", "Bleu, Orange, Blanc"),
    ("Mauritanie", "Afrique", "Arabe", "4500000", "Ouguiya", "3", "Vert, Jaune"),
    ("Maurice", "Afrique", "Anglais", "1300000", "Roupie mauricienne", "0", "Rouge, Bleu, Jaune, Vert"),
    ("Mexique", "Amerique", "Espagnol", "128000000", "Peso mexicain", "3", "Vert, Blanc, Rouge"),
    ("Micronesie", "Oceanie", "Anglais", "115000", "Dollar americain", "0", "Bleu, Blanc"),
    ("Moldavie", "Europe", "Roumain", "2600000", "Leu", "2", "Bleu, Jaune, Rouge"),
    ("Monaco", "Europe", "Français", "39000", "Euro", "0", "Rouge, Blanc"),
    ("Mongolie", "Asie", "Mongol", "3200000", "Tugrik", "2", "Rouge, Bleu"),
    ("Montenegro", "Europe", "Montenegrin", "622000", "Euro", "5", "Rouge, Jaune"),
    ("Maroc", "Afrique", "Arabe", "36000000", "Dirham", "3", "Rouge, Vert"),
    ("Mozambique", "Afrique", "Portugais", "31000000", "Metical", "6", "Vert, Noir, Jaune, Blanc, Rouge"),
    ("Myanmar", "Asie", "Birman", "54000000", "Kyat", "5", "Jaune, Vert, Rouge"),
    ("Namibie", "Afrique", "Anglais", "2500000", "Dollar namibien", "2", "Bleu, Rouge, Vert, Blanc, Jaune"),
    ("Nauru", "Oceanie", "Nauruan, Anglais", "10000", "Dollar australien", "0", "Bleu, Jaune"),
    ("Nepal", "Asie", "Nepalais", "29000000", "Roupie nepalaise", "2", "Rouge, Bleu"),
    ("Pays-Bas", "Europe", "Neerlandais", "17000000", "Euro", "2", "Rouge, Blanc, Bleu"),
    ("Nouvelle-Zelande", "Oceanie", "Anglais, Maori", "5000000", "Dollar neo-zelandais", "0", "Bleu, Rouge, Blanc"),
    ("Nicaragua", "Amerique", "Espagnol", "6500000", "Córdoba", "2", "Bleu, Blanc"),
    ("Niger", "Afrique", "Français", "24000000", "Franc CFA", "7", "Orange, Blanc, Vert"),
    ("Nigeria", "Afrique", "Anglais", "206000000", "Naira", "4", "Vert, Blanc"),
    ("Norvege", "Europe", "Norvegien", "5400000", "Couronne norvegienne", "1", "Rouge, Bleu, Blanc"),
    ("Oman", "Asie", "Arabe", "5000000", "Rial omanais", "3", "Rouge, Blanc, Vert"),
    ("Pakistan", "Asie", "Ourdou, Anglais", "220000000", "Roupie pakistanaise", "4", "Vert, Blanc"),
    ("Palaos", "Oceanie", "Anglais, Paluan", "18000", "Dollar americain", "0", "Bleu, Jaune"),
    ("Palestine", "Asie", "Arabe", "5000000", "Shekel israelien, Dinar jordanien", "4", "Noir, Blanc, Vert, Rouge"),
    ("Panama", "Amerique", "Espagnol", "4300000", "Balboa", "2", "Rouge, Blanc, Bleu"),
    ("Papouasie-Nouvelle-Guinee", "Oceanie", "Anglais, Tok Pisin, Hiri Motu", "9000000", "Kina", "1", "Noir, Rouge, Jaune"),
    ("Paraguay", "Amerique", "Espagnol, Guarani", "7000000", "Guarani", "3", "Rouge, Blanc, Bleu"),
    ("Perou", "Amerique", "Espagnol, Quechua, Aymara", "33000000", "Sol", "5", "Rouge, Blanc"),
    ("Philippines", "Asie", "Filipino, Anglais", "109000000", "Peso philippin", "3", "Rouge, Blanc, Bleu, Jaune"),
    ("Pologne", "Europe", "Polonais", "38000000", "Zloty", "7", "Blanc, Rouge"),
    ("Portugal", "Europe", "Portugais", "10000000", "Euro", "1", "Vert, Rouge"),
    ("Qatar", "Asie", "Arabe", "2800000", "Rial qatari", "1", "Marron, Blanc"),
    ("Roumanie", "Europe", "Roumain", "19000000", "Leu", "5", "Bleu, Jaune, Rouge"),
    ("Russie", "Europe, Asie", "Russe", "144000000", "Rouble", "16", "Blanc, Bleu, Rouge"),
    ("Rwanda", "Afrique", "Kinyarwanda, Français, Anglais", "12000000", "Franc rwandais", "4", "Bleu, Jaune, Vert"),
    ("Saint-Christophe-et-Nieves", "Amerique", "Anglais", "53000", "Dollar des Caraibes orientales", "0", "Vert, Jaune, Rouge, Noir"),
    ("Sainte-Lucie", "Amerique", "Anglais", "183000", "Dollar des Caraibes orientales", "0", "Bleu, Jaune, Noir, Blanc"),
    ("Saint-Vincent-et-les-Grenadines", "Amerique", "Anglais", "110000", "Dollar des Caraibes orientales", "0", "Bleu, Jaune, Vert"),
    ("Samoa", "Oceanie", "Samoan, Anglais", "198000", "Tala", "0", "Rouge, Bleu, Blanc"),
    ("Saint-Marin", "Europe", "Italien", "34000", "Euro", "2", "Bleu, Blanc"),
    ("Sao_Tome-et-Principe", "Afrique", "Portugais", "219000", "Dobra", "0", "Vert, Jaune, Rouge"),
    ("Arabie_Saoudite", "Asie", "Arabe", "34000000", "Riyal saoudien", "8", "Vert, Blanc"),
    ("Senegal", "Afrique", "Français", "16000000", "Franc CFA", "5", "Vert, Jaune, Rouge"),
    ("Serbie", "Europe", "Serbe", "7000000", "Dinar serbe", "8", "Rouge, Bleu, Blanc"),
    ("Seychelles", "Afrique", "Creole seychellois, Anglais, Français", "98000", "Roupie seychelloise", "0", "Rouge, Blanc, Bleu, Jaune, Vert"),
    ("Sierra_Leone", "Afrique", "Anglais", "8000000", "Leone", "6", "Vert, Blanc, Bleu"),
    ("Singapour", "Asie", "Anglais, Malais, Mandarin, Tamoul", "5700000", "Dollar de Singapour", "0", "Rouge, Blanc"),
    ("Slovaquie", "Europe", "Slovaque", "5400000", "Euro", "5", "Rouge, Blanc, Bleu"),
    ("Slovenie", "Europe", "Slovene", "2100000", "Euro", "4", "Rouge, Blanc, Bleu"),
    ("Iles_Salomon", "Oceanie", "Anglais", "686000", "Dollar des Iles Salomon", "0", "Bleu, Jaune, Vert"),
    ("Somalie", "Afrique", "Somali", "15400000", "Shilling somalien", "6", "Bleu, Blanc"),
    ("Afrique_du_Sud", "Afrique", "Anglais, Afrikaans, Zoulou, Xhosa", "58000000", "Rand", "6", "Vert, Jaune, Rouge, Bleu, Noir, Blanc"),
    ("Soudan_du_Sud", "Afrique", "Anglais", "11000000", "Livre sud-soudanaise", "6", "Noir, Rouge, Vert, Bleu, Blanc, Jaune"),
    ("Espagne", "Europe", "Espagnol", "47000000", "Euro", "5", "Rouge, Jaune"),
    ("Sri_Lanka", "Asie", "Cinghalais, Tamoul", "21000000", "Roupie sri-lankaise", "0", "Rouge, Jaune, Vert, Orange"),
    ("Soudan", "Afrique", "Arabe", "43000000", "Livre soudanaise", "7", "Rouge, Blanc, Noir, Vert"),
    ("Suriname", "Amerique", "Neerlandais", "586,000", "Dollar surinamais", "3", "Vert, Blanc, Rouge, Jaune"),
    ("Suede", "Europe", "Suedois", "10000000", "Couronne suedoise", "2", "Bleu, Jaune"),
    ("Suisse", "Europe", "Allemand, Français, Italien, Romanche", "8500000", "Franc suisse", "5", "Rouge, Blanc"),
    ("Syrie", "Asie", "Arabe", "17500000", "Livre syrienne", "5", "Rouge, Blanc, Noir, Vert"),
    ("Tadjikistan", "Asie", "Tadjik", "9500000", "Somoni", "4", "Rouge, Blanc, Vert"),
    ("Tanzanie", "Afrique", "Swahili, Anglais", "58000000", "Shilling tanzanien", "8", "Vert, Jaune, Noir, Bleu"),
    ("Thailande", "Asie", "Thai", "69000000", "Baht", "4", "Rouge, Blanc, Bleu"),
    ("Timor oriental", "Asie", "Tetum, Portugais", "1300000", "Dollar americain", "3", "Rouge, Jaune, Noir, Blanc"),
    ("Togo", "Afrique", "Français", "8000000", "Franc CFA", "3", "Vert, Jaune, Rouge, Blanc"),
    ("Tonga", "Oceanie", "Tongien, Anglais", "105000", "Pa'anga", "0", "Rouge, Blanc"),
    ("Trinite-et-Tobago", "Amerique", "Anglais", "1400000", "Dollar trinidadien", "0", "Rouge, Blanc, Noir"),
    ("Tunisie", "Afrique", "Arabe", "12000000", "Dinar tunisien", "2", "Rouge, Blanc"),
    ("Turquie", "Europe/Asie", "Turc", "84000000", "Livre turque", "8", "Rouge, Blanc"),
    ("Turkmenistan", "Asie", "Turkmene", "6000000", "Manat", "4", "Vert, Blanc, Rouge"),
    ("Tuvalu", "Oceanie", "Tuvaluan, Anglais", "11000", "Dollar australien", "0", "Bleu, Jaune"),
    ("Ouganda", "Afrique", "Anglais, Swahili", "42000000", "Shilling ougandais", "5", "Noir, Jaune, Rouge"),
    ("Ukraine", "Europe", "Ukrainien", "41000000", "Hryvnia", "7", "Bleu, Jaune"),
    ("Emirats_arabes_unis", "Asie", "Arabe", "9800000", "Dirham des emirats arabes unis", "5", "Rouge, Vert, Blanc, Noir"),
    ("Royaume-Uni", "Europe", "Anglais", "66000000", "Livre sterling", "1", "Rouge, Blanc, Bleu"),
    ("Etats-Unis", "Amerique", "Anglais", "331000000", "Dollar americain", "2", "Rouge, Blanc, Bleu"),
    ("Uruguay", "Amerique", "Espagnol", "3500000", "Peso uruguayen", "2", "Bleu, Blanc"),
    ("Ouzbekistan", "Asie", "Ouzbek", "33000000", "Som", "5", "Bleu, Blanc, Vert"),
    ("Vanuatu", "Oceanie", "Bichelamar, Anglais, Français", "307000", "Vatu", "0", "Vert, Rouge, Noir, Jaune"),
    ("Vatican", "Europe", "Italien, Latin", "800", "Euro", "0", "Jaune, Blanc"),
    ("Venezuela", "Amerique", "Espagnol", "28000000", "Bolivar", "3", "Jaune, Bleu, Rouge"),
    ("Vietnam", "Asie", "Vietnamien", "96000000", "Dong", "3", "Rouge, Jaune"),
    ("Yemen", "Asie", "Arabe", "30000000", "Rial yemenite", "2", "Rouge, Blanc, Noir"),
    ("Zambie", "Afrique", "Anglais", "18000000", "Kwacha zambien", "8", "Vert, Rouge, Noir, Orange"),
    ("Zimbabwe", "Afrique", "Anglais, Shona, Ndebele", "15000000", "Dollar zimbabween", "4", "Vert, Jaune, Rouge, Noir"),
)


def add_country(
    dictionary: Dictionary,
    country: str,
    continent: str,
    language: str,
    population: str,
    currency: str,
    borders: str,
    colors: str,
) -> None:
    """Add the six attributes of ``country`` under its name, in a fixed order."""
    for value in (continent, language, population, currency, borders, colors):
        dictionary.add(country, value)


def load_countries() -> Dictionary:
    """Build a fresh dictionary holding every known country."""
    countries = Dictionary()
    for record in _COUNTRIES:
        add_country(countries, *record)
    return countries