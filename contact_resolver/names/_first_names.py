"""Known first names used for dictionary segmentation of email local parts.

Only given names belong here. Surnames that look like first-name compounds
("markham", "robertson") must stay out or they will be split wrongly.
"""

FIRST_NAMES = (
    "aaliya", "aaliyah", "aamir", "aarav", "aaron", "abbie", "abdi", "abdullah",
    "abigail", "abimbola", "adaeze", "adam", "adeel", "adelaide", "adenike", "adewale",
    "aditya", "adrian", "adriana", "afolabi", "agata", "agnieszka", "ahmed", "ahmet",
    "ahsan", "aidan", "aiden", "ailsa", "aisha", "aishwarya", "aisling", "aitor",
    "ajay", "akash", "akiko", "akira", "akosua", "alain", "alan", "alastair", "alba",
    "albert", "alberto", "aldo", "alejandro", "aleksandra", "alessandra", "alessia",
    "alessio", "alex", "alexander", "alexandra", "alexandros", "alexandru", "alfie",
    "algis", "ali", "alice", "alicia", "alicja", "alina", "alishba", "alison",
    "alistair", "alper", "alun", "alva", "alvaro", "amanda", "amara", "amber", "amelia",
    "amelie", "amina", "amir", "amit", "amruta", "amy", "ana", "anabel", "anam",
    "anand", "ananya", "anas", "anastasios", "anca", "ander", "anders", "andre",
    "andrea", "andreas", "andreea", "andreia", "andrew", "androniki", "andrzej",
    "aneta", "angela", "angelo", "angus", "anh", "aniko", "anil", "anindya", "anish",
    "anita", "anjali", "anke", "ankit", "anna", "anne", "annett", "annie", "anthony",
    "antoine", "antonella", "antonio", "antonios", "aodhan", "aoife", "apoorva", "aqib",
    "arantzazu", "archana", "archie", "areeba", "arianna", "arjun", "arkadiusz", "arlo",
    "arnab", "arnau", "arnaud", "aroha", "arpit", "arthur", "artur", "arvid", "arwel",
    "arzu", "asad", "asha", "ashley", "ashton", "asier", "asim", "astrid", "aswini",
    "athena", "atif", "attila", "aubrey", "audrey", "aurelie", "aurora", "ausra",
    "austin", "ava", "axel", "ayaan", "ayesha", "aylin", "ayse", "aysegul", "ayumi",
    "azhar",
    "bahadir", "bahar", "balazs", "bao", "baptiste", "barbara", "baris", "barnaby",
    "barrie", "barry", "bartlomiej", "bartosz", "basil", "beata", "beatrice", "beatriz",
    "becky", "bella", "ben", "benjamin", "benoit", "bernd", "bernhard", "bertie",
    "bertrand", "beth", "bethan", "bethany", "beverley", "beverly", "bhavya", "bianca",
    "bilal", "binh", "birgit", "blake", "blazej", "bobby", "bogdan", "bola", "bozena",
    "brad", "bradley", "brandon", "brenda", "breo", "breogan", "brian", "bridget",
    "brigitte", "brittany", "brodie", "bronagh", "brooke", "bruce", "bruno", "bryn",
    "bukola", "burak", "buse",
    "caitlin", "caleb", "callum", "calum", "cameron", "camilla", "canan", "carl",
    "carla", "carlos", "carmen", "carol", "caroline", "carolyn", "carter", "carwyn",
    "catarina", "cathal", "catherine", "cedric", "celine", "cem", "cengiz", "ceri",
    "cerys", "chantal", "chao", "charalampos", "charles", "charlie", "charlotte",
    "chen", "cheng", "cheryl", "chiamaka", "chiara", "chidi", "chidinma", "chihiro",
    "chinelo", "chinonso", "chloe", "chris", "christine", "christoph", "christopher",
    "christos", "cian", "ciaran", "cinzia", "ciprian", "claire", "clara", "clark",
    "claude", "claudia", "claudio", "claus", "clementine", "clifford", "clint",
    "cliodhna", "clive", "colin", "colleen", "colm", "connie", "connor", "conor",
    "cooper", "corey", "cornelia", "cosmin", "courtney", "craig", "crispin", "cristian",
    "cristiano", "cristina", "cyrille", "czeslaw",
    "daffydd", "dagmar", "dagmara", "daichi", "dainius", "daisuke", "daisy", "dale",
    "dalia", "damian", "damilola", "dandan", "daniel", "daniela", "danielle", "danish",
    "daniyal", "danuta", "daphne", "dariusz", "darragh", "darren", "dave", "david",
    "davide", "dawid", "dawn", "dean", "debbie", "debojyoti", "deborah", "declan",
    "deepak", "deepika", "deirdre", "delia", "della", "delphine", "delroy", "denis",
    "denise", "dennis", "derek", "derrick", "derya", "desmond", "despoina", "destiny",
    "detlef", "dev", "devika", "devon", "diana", "diane", "diarmuid", "diego", "dieter",
    "dietrich", "dilek", "dimitra", "dimitrios", "dimitris", "diogo", "dion", "dirk",
    "divya", "dominic", "dominik", "dominika", "donald", "dongwoo", "donna", "doris",
    "dorota", "dorothy", "douglas", "duc", "duncan", "dylan",
    "ebele", "ebru", "eddie", "edmund", "edna", "edoardo", "edouard", "edward", "edyta",
    "efstratios", "eileen", "eilidh", "eirian", "eirianwen", "elaine", "eleanor",
    "eleftheria", "elena", "elias", "elif", "elina", "elinor", "elisa", "elizabeth",
    "ella", "ellie", "elliot", "elliott", "ellis", "elodie", "elpida", "elsie",
    "elzbieta", "emanuele", "emeka", "emil", "emilia", "emily", "emine", "emma",
    "emmanuel", "emre", "enid", "enrico", "enzo", "eoin", "erdal", "erdem", "erhan",
    "eric", "erica", "erich", "erik", "erin", "ernest", "errol", "espen", "esra",
    "esther", "eszter", "ethan", "etienne", "euan", "eunji", "eva", "evan", "evangelia",
    "eve", "evelyn", "ewa", "ewan",
    "fabien", "fabio", "fabrizio", "fadumo", "fahad", "fahim", "fang", "faraz",
    "farhan", "fathi", "fatih", "fatima", "fatma", "fatuma", "fawad", "faye",
    "federica", "felix", "feng", "fergal", "ferhat", "fernando", "fflur", "filip",
    "filipe", "filippo", "filiz", "finlay", "finley", "finn", "fiona", "fionnuala",
    "firat", "flavia", "flavio", "fleur", "florence", "florian", "florin", "folake",
    "frances", "francesca", "francis", "francisco", "franck", "frank", "frankie",
    "frantisek", "fred", "freddie", "frederic", "frederik", "freja", "freya", "frida",
    "friedhelm", "friedrich", "fritz", "funke", "funmi",
    "gabi", "gabor", "gabriel", "gabriela", "gabrielle", "gael", "gail", "gamze",
    "gareth", "gary", "gautam", "gauthier", "gavin", "gemma", "genevieve", "george",
    "georgia", "georgios", "geraldine", "gerard", "gerd", "gerhard", "gertrud",
    "giacomo", "giada", "gianluca", "gianluigi", "gianmarco", "giedrius", "gilbert",
    "gilles", "gillian", "giorgia", "giorgio", "giorgos", "giovanna", "giovanni",
    "giulia", "giuliana", "giuseppe", "gladys", "godfrey", "goetz", "gokhan", "gonca",
    "goncalo", "gonzalo", "gordon", "gorka", "grace", "graeme", "graham", "grahame",
    "grainne", "grant", "grazyna", "greer", "greg", "gregory", "greig", "greta",
    "grzegorz", "guang", "gudrun", "guenter", "guido", "guilherme", "guillaume",
    "gulcan", "gurpreet", "gustav", "guy", "gwen", "gwenllian", "gwyn", "gwynfor",
    "gyorgy",
    "habiba", "hafsa", "hailey", "hakan", "halil", "halina", "hamdi", "hamish", "hamza",
    "hana", "hanh", "hannah", "hannelore", "hans", "hao", "harish", "harper",
    "harpreet", "harri", "harriet", "harry", "harshit", "hartmut", "haruka", "harvey",
    "hassan", "hatice", "hayden", "heather", "hector", "heidi", "heike", "heinz",
    "helen", "helene", "helmut", "hemant", "henrik", "henry", "henryk", "herbert",
    "hermione", "herve", "hester", "hien", "hilary", "hilda", "hina", "hira", "hiro",
    "hiroshi", "hoang", "holger", "holly", "hong", "horst", "howard", "hua", "hudson",
    "hugo", "hui", "humphrey", "hunter", "huseyin", "hussain", "huy", "hyejin", "hyun",
    "hywel",
    "iain", "ian", "ida", "idris", "iestyn", "ieuan", "ifeoluwa", "ifeoma", "ilaria",
    "ilhan", "ilona", "iman", "imogen", "imran", "inder", "indraneet", "ines", "inga",
    "inge", "ingeborg", "ingo", "ingram", "ingrid", "innes", "ioana", "ioanna",
    "ioannis", "iona", "ionut", "iqra", "iratxe", "irene", "irfan", "iria", "irini",
    "iris", "isaac", "isabel", "isabella", "isabelle", "isak", "isha", "isla", "ismail",
    "isobel", "istvan", "ivan", "ivy", "iwona", "izabela",
    "jacek", "jacinta", "jack", "jackie", "jacob", "jacqueline", "jacques", "jade",
    "jadwiga", "jaehyun", "jagoda", "jake", "jakub", "jamal", "james", "jamie", "jan",
    "jana", "jane", "janet", "janice", "janos", "janusz", "jarek", "jaroslaw", "jarvis",
    "jasmine", "jason", "javed", "javier", "jayden", "jean", "jeanette", "jeff",
    "jeffrey", "jemma", "jennifer", "jenny", "jens", "jeremy", "jerzy", "jesse",
    "jessica", "jia", "jian", "jieun", "jill", "jimmy", "jing", "jinwoo", "jiri",
    "jitka", "jiyeon", "joan", "joana", "joanna", "joanne", "joao", "joaopedro",
    "jocelyn", "jochen", "joel", "joerg", "johanna", "johannes", "john", "jolanta",
    "jolene", "jonas", "jonathan", "jordan", "jordi", "jorge", "jose", "josefine",
    "joseph", "josephina", "josephine", "josh", "joshua", "joy", "joyce", "juan",
    "judith", "judy", "juergen", "julia", "julian", "julie", "julien", "juliette",
    "jun", "june", "justin", "justyna", "jutta",
    "kabir", "kai", "kamil", "kamila", "kamran", "karen", "karin", "karl", "karol",
    "karolina", "karsten", "karthik", "kasper", "katalin", "katarzyna", "kate",
    "katerina", "katherine", "kathleen", "kathryn", "katie", "katja", "kavita", "kay",
    "kayla", "kayleigh", "kazimierz", "kazuki", "keerthi", "keiko", "keiran", "keith",
    "kelly", "kemal", "kemi", "ken", "kenji", "kenneth", "kenny", "kenta", "kerem",
    "kerry", "kevin", "khadija", "khalid", "khanh", "kieran", "kim", "kimberly",
    "kinga", "kingsley", "kinza", "kiran", "kirsten", "kirsty", "klaudia", "klaus",
    "kofi", "konrad", "konstantinos", "koray", "kostas", "kristian", "krystian",
    "krystyna", "krzysztof", "kumar", "kumiko", "kurt", "kwame", "kwesi", "kyle",
    "kyriaki",
    "lachlan", "laetitia", "laia", "laiba", "lakshmi", "lan", "lance", "laszlo",
    "lateef", "latoya", "laura", "lauren", "laurence", "laurent", "lavinia", "lawrence",
    "layla", "leah", "lech", "lee", "lei", "leighton", "leire", "leo", "leon",
    "leonard", "leonardo", "leopold", "leroy", "lesley", "leszek", "lewis", "leyla",
    "liam", "liban", "lidia", "lily", "linda", "ling", "linh", "linnea", "linus",
    "lionel", "lisa", "lixia", "liz", "lizzie", "lloyd", "logan", "loic", "lorenzo",
    "lorna", "lorraine", "lothar", "louis", "louise", "lowri", "luca", "lucas", "lucia",
    "luciano", "lucie", "lucien", "lucienne", "lucinda", "lucy", "luigi", "luis",
    "luisa", "lukas", "lukasz", "luke", "lutz", "lydia", "lynn",
    "mabel", "maciej", "maddison", "madeleine", "madelyn", "madhav", "madison", "mads",
    "magdalena", "maggie", "magnus", "maialen", "mairi", "maisie", "maja", "maki",
    "makoto", "malcolm", "malgorzata", "malik", "malin", "manaia", "mandy", "manfred",
    "manoj", "manuel", "marc", "marcel", "marcia", "marcin", "marco", "marcos",
    "marcus", "marek", "margaret", "margarida", "margaux", "margherita", "maria",
    "marian", "mariana", "mariano", "marie", "marilyn", "marina", "marion", "mariusz",
    "marjorie", "mark", "markus", "marlene", "marshall", "marta", "martha", "marthe",
    "martin", "martyna", "mary", "maryam", "masashi", "mason", "massimo", "mateus",
    "mateusz", "mathieu", "mathilde", "matilda", "matt", "matteo", "matthew",
    "matthias", "maureen", "mauro", "mavis", "max", "maxime", "maxine", "maxwell",
    "mayank", "mayumi", "meera", "megan", "megha", "megumi", "mehmet", "mei", "meike",
    "melanie", "melek", "melissa", "meritxell", "mert", "merve", "mervyn", "meryl",
    "mette", "mia", "michael", "michal", "michalis", "michel", "michela", "michelle",
    "miguel", "miguelangel", "mihaela", "mihai", "mika", "mike", "mila", "milena",
    "miles", "millicent", "millie", "min", "mindaugas", "ming", "minh", "minho",
    "minji", "minjung", "miranda", "miroslav", "miroslaw", "misaki", "mitchell",
    "mohamed", "mohammed", "mohit", "mohsin", "moira", "moiz", "molly", "monica",
    "monika", "monique", "montague", "montserrat", "morag", "morgan", "muhammad",
    "muneeb", "murat", "murdo", "muriel", "mustafa", "myrtle",
    "nadia", "nadine", "naina", "nan", "nancy", "nanna", "naomi", "nasir", "natalia",
    "natalie", "natasha", "nathalie", "nathan", "naveed", "navid", "necdet", "neel",
    "neelam", "neha", "neil", "nerea", "neville", "ngan", "ngozi", "nhat", "nia",
    "niamh", "nicholas", "nick", "nicola", "nicolas", "nigel", "nihan", "nihat",
    "nikhil", "niki", "nikolaos", "nikos", "nilufer", "nimra", "nina", "nisha", "nitin",
    "nkechi", "nnamdi", "nneka", "noah", "noel", "noelia", "noman", "noor", "nora",
    "norbert", "norma", "norman", "nur", "nuray", "nuria",
    "obinna", "odette", "oisin", "okan", "olaf", "olajide", "olamide", "olanrewaju",
    "olaus", "olayinka", "oliver", "olivia", "olivier", "ollie", "olu", "oluchi",
    "oluwaseun", "oluwatobiloba", "omar", "ondrej", "onur", "orhan", "oriol", "orla",
    "ornella", "oscar", "oskar", "osman", "ottilie", "otto", "owais", "owen", "ozgur",
    "ozlem",
    "pablo", "padraig", "paige", "pallavi", "pamela", "panagiotis", "paola", "paolo",
    "paraskevi", "parvez", "pascal", "pascale", "pasquale", "patrice", "patricia",
    "patrick", "patrycja", "patryk", "paul", "paula", "paulette", "paulina", "pauline",
    "paulo", "pavel", "pavlos", "pawel", "pedro", "penelope", "penny", "percival",
    "pete", "peter", "petr", "petra", "petros", "phil", "philip", "philippe", "phoebe",
    "phuong", "pierre", "piers", "pietro", "pinar", "ping", "piotr", "pippa", "pol",
    "polly", "pooja", "poppy", "pradeep", "prakash", "prasad", "priya", "priyanka",
    "prudence", "przemyslaw",
    "qian", "qing", "quang", "quentin",
    "rachel", "radek", "radhika", "radoslaw", "rafal", "rafel", "raffaele", "rahul",
    "rainer", "raj", "raja", "rakesh", "ralf", "ralph", "raluca", "rana", "raquel",
    "rasa", "rasmus", "raul", "ravi", "ray", "raymond", "razvan", "rebecca", "recep",
    "reema", "reg", "reginald", "rehan", "reinhard", "remi", "remigiusz", "renata",
    "renate", "renaud", "rhian", "rhiannon", "rhys", "riccardo", "richard", "rick",
    "riley", "rishi", "rita", "ritu", "rizwan", "rob", "robert", "roberta", "roberto",
    "robin", "rocio", "rodney", "rodrigo", "roger", "rohan", "rohit", "roisin",
    "roland", "rolandas", "rolf", "romain", "roman", "ronald", "ronan", "rory", "rosa",
    "rosalind", "rosamund", "rose", "rosemary", "rosie", "ross", "rossella", "rowena",
    "roxana", "roy", "ruben", "ruby", "rudolph", "ruediger", "rui", "rupert", "russell",
    "ruta", "ruth", "ryan", "ryota", "ryszard",
    "saad", "sabine", "sabrina", "sachiko", "sahil", "sahra", "sajid", "sakura",
    "salim", "sally", "salman", "salvatore", "sam", "samantha", "samatar", "samir",
    "samiya", "samuel", "sana", "sandor", "sandra", "sanjay", "santhosh", "saoirse",
    "sara", "sarah", "sarmad", "satoshi", "savannah", "sayali", "sayantan", "sayuri",
    "scarlett", "scott", "sean", "sebastian", "sebastien", "seda", "segun", "selim",
    "selma", "selwyn", "serap", "serdar", "seren", "serena", "sergio", "serkan",
    "seunghyun", "sevgi", "shahid", "shahzaib", "shan", "shane", "shannon", "sharon",
    "shaun", "shayan", "sheila", "sheridan", "sheryar", "shingo", "shirley", "shivani",
    "shoaib", "shona", "shreya", "shreyas", "shruti", "shu", "sian", "sibel",
    "siddharth", "siegfried", "sienna", "sigrid", "silke", "silvia", "simen", "simon",
    "simona", "simone", "simran", "sinan", "sinead", "sinem", "siobhan", "slawek",
    "slawomir", "sneha", "sofia", "sofie", "sola", "sonia", "sonja", "sophia", "sophie",
    "sorin", "sotirios", "soumya", "soyeon", "spencer", "spyros", "stacey", "stanislaw",
    "stanley", "stavros", "stavroula", "stefan", "stefano", "stella", "stephane",
    "stephanie", "stephen", "steve", "steven", "stewart", "stuart", "subhajit", "sue",
    "suji", "sujit", "sulaimon", "suleyman", "sungjin", "sunita", "suresh", "susan",
    "susanne", "sushma", "suzanne", "suzie", "swapnil", "sybil", "sydney", "sylvain",
    "sylvia", "sylvie", "sylwia", "szymon",
    "tadeusz", "takashi", "takeshi", "talha", "tam", "tamara", "tamas", "tane", "taner",
    "tanja", "tanvi", "tanya", "tao", "tara", "tariq", "tarquin", "tarun", "tatsuya",
    "tauseef", "taylor", "tayyab", "temitope", "teresa", "terrence", "terry", "tessa",
    "thanasis", "theo", "theodora", "theodoros", "theresa", "therese", "thi", "thierry",
    "thomas", "thomasina", "thorsten", "thuy", "tiago", "tibor", "tien", "tim",
    "timothy", "tina", "ting", "tobi", "tobias", "toby", "todd", "tolga", "tolulope",
    "tom", "tomas", "tomasz", "tommaso", "tommy", "tomos", "tony", "torsten", "tracy",
    "trang", "trevor", "tristan", "tristram", "trudy", "truls", "trung", "tuan",
    "tuncay", "tunde", "turgut", "tuyen", "tyler",
    "uchechukwu", "ugochukwu", "ugur", "ulf", "ulrike", "umair", "umar", "umberto",
    "unai", "ursula", "urszula", "usman", "ute", "uwe", "uxia",
    "vaclav", "valdas", "valentina", "valerie", "van", "vanessa", "varun", "vasiliki",
    "vasilis", "vassilis", "venetia", "vera", "veronica", "veronika", "veronique",
    "vicky", "victor", "victoria", "viet", "vignesh", "vijay", "vikram", "viktor",
    "vilde", "ville", "vilma", "vinay", "vincent", "vincenzo", "violet", "virginia",
    "vishal", "vittorio", "vivaan", "vivian", "vlad", "vladimir", "volkan", "volker",
    "vytautas",
    "waldemar", "wale", "walther", "wanda", "waqas", "warren", "waseem", "wayne", "wei",
    "wen", "wendy", "werner", "weronika", "wiktor", "wilfred", "wilfried", "william",
    "wilma", "winfried", "winifred", "winston", "wioletta", "witold", "wojciech",
    "wolfgang", "woojin",
    "xabier", "xavier", "xia", "xiao", "xin", "xiu", "xiulan", "xoan",
    "yan", "yang", "yann", "yannis", "yasemin", "yash", "yasin", "yasir", "yasmin",
    "yejin", "yemi", "yewande", "yilmaz", "ying", "yoko", "yong", "youngjae", "yuan",
    "yue", "yuki", "yumi", "yuna", "yunus", "yusra", "yusuf", "yusuke", "yves",
    "yvonne",
    "zach", "zachary", "zahid", "zain", "zainab", "zara", "zbigniew", "zdenek",
    "zeeshan", "zehra", "zeinab", "zenon", "zeynep", "zhen", "zhi", "zoe", "zofia",
    "zoltan", "zsolt", "zsuzsa", "zubair", "zuzanna",
)
