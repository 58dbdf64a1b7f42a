from sys import exit

from seekfind import main

exit(main())
