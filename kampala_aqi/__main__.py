import sys

from kampala_aqi.main import main


sys.exit(main())
